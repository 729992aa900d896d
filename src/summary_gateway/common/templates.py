"""Prompt templating helpers."""
from __future__ import annotations
from pathlib import Path

PLACEHOLDER = "{{input}}"

SUMMARY_TEMPLATE = """Summarize the following text into 1-4 short sentences. Follow these specific rules:

1. The first 5-6 words are crucial and should be direct and action-oriented, avoiding words like 'regarding', 'concerning', or 'about'.
2. If the text contains a delivery or tracking number, ALWAYS start with that number (e.g., "02167500003781 - part shipped to locker").
3. If the text contains an FSI number (FSIxxxxxxx), do NOT include it in the first 6 words. It can be mentioned later in the summary if relevant.
4. Start with the most important action or subject.
5. Include any other reference numbers or key identifiers.

Example formats:
- For tracking numbers: "02167500003781 - part shipped to locker" followed by the rest of the summary.
- For other cases: "Engineer visit scheduling: FSI0252801" followed by the rest of the summary.

Text to summarize:
{{input}}"""

def load_template(path: str | None = None) -> str:
    """
    Load a prompt template.

    Args:
        path: Optional template file; the built-in summary template is used when omitted.
    """
    if path is None:
        return SUMMARY_TEMPLATE
    return Path(path).read_text(encoding="utf-8")

def render_prompt(template: str, user_input: str) -> str:
    """
    Render user input into the template.

    Args:
        template: Template content containing {{input}}.
        user_input: Input string, inserted verbatim.

    Returns:
        Rendered prompt.
    """
    return template.replace(PLACEHOLDER, user_input, 1)