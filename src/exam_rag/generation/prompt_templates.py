"""All prompt templates for the exam tutor, plus the pure builders that fill them.

Builders never raise and never validate: whatever the caller passes is
interpolated as-is.
"""

from __future__ import annotations

import json

from exam_rag.config.constants import (
    DEFAULT_MODEL_LABEL,
    FALLBACK_LANGUAGE,
    KNOWLEDGE_BASE_CONTEXT,
    LANGUAGE_LABELS,
    UNKNOWN_OPTION_LABEL,
)
from exam_rag.models.domain import AutoTestConfig, Question, SolverConfig

RETRIEVAL_PROMPT = """You are a RAG (Retrieval Augmented Generation) system.
Your task is to simulate retrieving text fragments from university lecture notes about Ubuntu 24.04 and Bash.

Question: "{statement}"
Options: {options_json}
Language of the retrieved context: {language}.

Generate a technical passage that looks like it was extracted from a PDF of operating-systems lecture notes and that contains the answer.
The text must be technical, academic and precise."""

ANSWER_PROMPT = """Act as an expert agent on the Ubuntu 24.04 operating system.
Simulate that you are the LLM "{model_name}".
{provider_info}
Answer the multiple-choice question based EXCLUSIVELY on the retrieved context below.

IMPORTANT: THE REASONING MUST BE WRITTEN IN {language_upper}.

CONFIGURATION PARAMETERS:
- Temperature: {temperature} (adjust your creativity accordingly)
- Source Model: {model_name}

--- RETRIEVED CONTEXT ---
{context}
-------------------------

Question ID: {question_id}
Statement: {statement}
Options:
{options_block}

Return the answer as strict JSON."""

BATCH_PROMPT = """Act as a university professor who is an expert in Operating Systems.
Your task is to generate multiple-choice exam questions.

GENERATION SETTINGS:
- Topic: "{topic}"
- Quantity: {count} questions.
- Difficulty: {difficulty}
- OUTPUT LANGUAGE (MANDATORY): {language_upper}.

CROSS-LANGUAGE INSTRUCTION:
The source content (simulated context) may be in Spanish or English.
YOU MUST TRANSLATE AND ADAPT the questions and answers to the requested OUTPUT LANGUAGE ({language_upper}).

REQUIREMENTS:
- Every question must have exactly 4 options.
- Only one option is correct.
- Questions must be academic and precise for Ubuntu 24.04.

Use the following simulated knowledge base as reference:
{knowledge_base}

Return ONLY a valid JSON array with the questions."""

DISTRACTOR_PROMPT = """You are an expert in Ubuntu 24.04 operating-systems exams.

Question: "{statement}"
Correct Answer: "{correct_option}"
Current Incorrect Option (To Replace): "{current_option}"
Other existing options: {other_options_json}

TASK: Generate ONE (1) new, plausible incorrect option (distractor) to replace the current one.
It must be different from the correct answer and from the other options.
It should be a common mistake or a similar but invalid command.
{rejection_note}
OUTPUT LANGUAGE: {language_upper}.

Return ONLY the text of the new option. No explanations, no quotes."""

DISTRACTOR_REJECTION_NOTE = """The option "{rejected}" was rejected because it repeats an existing option. Propose a different one.
"""

VARIANTS_PROMPT = """You are an expert in creating variants of exam questions for Ubuntu 24.04 operating systems.

ORIGINAL QUESTION:
Topic: {topic}
Statement: "{statement}"
Correct Option: {correct_option}

TASK:
Generate {count} variants of this question.
The variants must assess the SAME CONCEPT (e.g. permissions, pipes, processes) but with different wording, a different scenario, or asking the inverse.

Example:
Original: "Command to list files?"
Variant 1: "If I want to see the files, what do I use?"
Variant 2: "Which of these does NOT list files?"

OUTPUT LANGUAGE: {language_upper}.

Return ONLY a valid JSON array with the questions (each with statement, options and correct_index)."""

JURY_PROMPT = """Act as a PANEL OF EXPERTS on Ubuntu 24.04 operating systems.
You must simulate 3 different people analysing the same question to verify the correct answer.

QUESTION: "{statement}"
OPTIONS:
{options_block}

THE 3 EXPERTS ARE:
1. "Senior SysAdmin" (role: sysadmin): Pragmatic, focused on what works in production.
2. "Theory Professor" (role: professor): Academic, strict about terminology and official documentation.
3. "Security Auditor" (role: security): Paranoid, looks for edge cases and security issues.

TASK:
Each expert must vote for the correct option (1-4) and give a very short reason (max 15 words) in {language_upper}.

Return a JSON array with one vote per expert."""

TOPICS_PROMPT = """Analyse the following text (operating-systems lecture notes) and identify the structure of its main topics or chapters.

Text:
{knowledge_base}

Extract a list of 4 to 8 main topics using the format "Topic N: Descriptive title".
If the text is not enough, infer logical topics from keywords (e.g. Permissions, Processes, Files)."""

DIFFICULTY_FRAMING = {
    "basic": (
        "Basic level (Memorisation and Concepts). Direct questions about "
        "definitions and simple commands."
    ),
    "intermediate": (
        "Intermediate level (Comprehension). Questions about command flags "
        "and basic management."
    ),
    "advanced": (
        "Advanced level (Application and Analysis). Troubleshooting scenarios, "
        "complex scripts and advanced permission management."
    ),
}


def language_label(language: str) -> str:
    """Display name for a language code; unknown codes fall back to Spanish."""
    return LANGUAGE_LABELS.get(language, LANGUAGE_LABELS[FALLBACK_LANGUAGE])


def describe_model(config: SolverConfig | None) -> tuple[str, str]:
    """Return (model name, provider note) for the nominal configuration."""
    if config is None:
        return DEFAULT_MODEL_LABEL, "(RAG simulation)"
    if config.provider == "external" and config.external_model:
        return config.external_model, f"(External API simulation: {config.external_model})"
    if config.selected_model:
        return config.selected_model, "(Local Ollama simulation)"
    return DEFAULT_MODEL_LABEL, "(RAG simulation)"


def format_options_block(options: list[str]) -> str:
    return "\n".join(f"{i}. {option}" for i, option in enumerate(options, 1))


def build_retrieval_prompt(question: Question, language: str) -> str:
    return RETRIEVAL_PROMPT.format(
        statement=question.statement,
        options_json=json.dumps(question.options, ensure_ascii=False),
        language=language_label(language),
    )


def build_answer_prompt(
    question: Question,
    context: str,
    config: SolverConfig | None,
    language: str,
) -> str:
    model_name, provider_info = describe_model(config)
    temperature = config.temperature if config and config.temperature else 0.7
    return ANSWER_PROMPT.format(
        model_name=model_name,
        provider_info=provider_info,
        language_upper=language_label(language).upper(),
        temperature=temperature,
        context=context,
        question_id=question.id,
        statement=question.statement,
        options_block=format_options_block(question.options),
    )


def build_batch_prompt(config: AutoTestConfig) -> str:
    return BATCH_PROMPT.format(
        topic=config.topic,
        count=config.count,
        difficulty=DIFFICULTY_FRAMING.get(config.difficulty, ""),
        language_upper=language_label(config.language).upper(),
        knowledge_base=KNOWLEDGE_BASE_CONTEXT,
    )


def build_distractor_prompt(
    question: Question,
    option_index: int,
    language: str,
    rejected: str | None = None,
) -> str:
    """``option_index`` is 1-based, like ``Question.correct_index``."""
    position = option_index - 1
    others = [opt for i, opt in enumerate(question.options) if i != position]
    return DISTRACTOR_PROMPT.format(
        statement=question.statement,
        correct_option=question.correct_option or UNKNOWN_OPTION_LABEL,
        current_option=question.options[position],
        other_options_json=json.dumps(others, ensure_ascii=False),
        rejection_note=(
            DISTRACTOR_REJECTION_NOTE.format(rejected=rejected) if rejected else ""
        ),
        language_upper=language_label(language).upper(),
    )


def build_variants_prompt(question: Question, count: int, language: str) -> str:
    return VARIANTS_PROMPT.format(
        topic=question.topic,
        statement=question.statement,
        # Without a known answer the first option stands in
        correct_option=question.correct_option or question.options[0],
        count=count,
        language_upper=language_label(language).upper(),
    )


def build_jury_prompt(question: Question, language: str) -> str:
    return JURY_PROMPT.format(
        statement=question.statement,
        options_block=format_options_block(question.options),
        language_upper=language_label(language).upper(),
    )


def build_topics_prompt() -> str:
    return TOPICS_PROMPT.format(knowledge_base=KNOWLEDGE_BASE_CONTEXT)
