"""Fixed values shared by prompts and post-processing."""

from __future__ import annotations

LANGUAGE_LABELS = {
    "es": "Spanish (Castellano)",
    "eu": "Basque (Euskara)",
    "en": "English",
}
# Unknown language codes render with this label
FALLBACK_LANGUAGE = "es"

COURSE_TOPICS = [
    "Topic 1: Introduction to Operating Systems and Linux",
    "Topic 2: File Systems",
    "Topic 3: Permissions and User Management",
    "Topic 4: Process Management",
    "Topic 5: Shell Scripting (Bash)",
    "Topic 6: System and Network Administration",
]

GLOBAL_TOPIC = "Global (mixed topics)"
ALL_TOPICS = "All"
ROTATING_TOPIC_PREFIX = "Random"

OLLAMA_MODELS = [
    "llama3",
    "mistral",
    "gemma:7b",
    "phi3",
    "neural-chat",
    "starling-lm",
    "vicuna",
]

DEFAULT_MODEL_LABEL = "Gemini (Default)"
UNKNOWN_OPTION_LABEL = "Unknown"

# Simulated retrieval
RETRIEVED_RELEVANCE_SCORE = 0.92
CONTEXT_PREVIEW_CHARS = 300
RETRIEVED_SOURCE_TEMPLATE = "iso_notes_{language}.pdf"

KNOWLEDGE_BASE_CONTEXT = """
---
# OS Notes - Topic 3: File Management and Permissions

## The chmod command
'chmod' (change mode) changes the access permissions of files and directories.
Symbolic syntax: chmod [who][operator][permission] file
- Who: u (user/owner), g (group), o (others), a (all).
- Operator: + (add), - (remove), = (set exactly).
- Permission: r (read), w (write), x (execute).

Example: 'chmod u+x file' adds execute permission for the owner only.

## Special variables in Bash
- $0: Name of the script.
- $1, $2...: Positional arguments.
- $#: Total number of arguments.
- $?: Exit status of the last command (0 success, !=0 error).
- $$: PID of the current process.
---
"""

# Substituted when the retrieve phase fails
FALLBACK_CONTEXT = KNOWLEDGE_BASE_CONTEXT
