"""Custom exception hierarchy for the exam RAG tutor."""


class ExamRAGError(Exception):
    """Base exception for all exam RAG errors."""


class ConfigurationError(ExamRAGError):
    """Error in system configuration."""


class MissingCredentialError(ConfigurationError):
    """No provider credential is configured."""


class GatewayError(ExamRAGError):
    """Error while calling the generation model."""


class ProviderError(GatewayError):
    """The network call to the provider failed."""


class EmptyResponseError(GatewayError):
    """The provider answered but returned no text."""


class MalformedOutputError(GatewayError):
    """Returned text is not valid JSON or does not match the requested shape."""
