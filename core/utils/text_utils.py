"""Text processing utilities."""
import re
from typing import Iterable, Mapping, Optional


def substitute_placeholders(text: str, placeholders: Optional[Mapping[str, str]] = None) -> str:
    """
    Replace every {key} token in text with the lower-cased placeholder value.
    
    Tokens are matched case-insensitively and keys are taken literally.
    Substitution follows the mapping's iteration order, so a value that itself
    contains a later {key} token is substituted again by that later key.
    
    Args:
        text: Text containing {key} tokens
        placeholders: Mapping of token name to replacement value
    
    Returns:
        Text with tokens replaced
    """
    if not placeholders:
        return text
    
    for key, value in placeholders.items():
        pattern = re.compile(r"\{" + re.escape(key) + r"\}", re.IGNORECASE)
        replacement = value.lower()
        text = pattern.sub(lambda _match: replacement, text)
    
    return text


def normalize_question(question: str, placeholders: Optional[Mapping[str, str]] = None) -> str:
    """Lower-case a question and fill in its placeholders."""
    return substitute_placeholders(question.lower(), placeholders)


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """Check whether any keyword occurs in text as a substring."""
    return any(keyword in text for keyword in keywords)


def truncate(text: str, limit: int = 100) -> str:
    """Shorten text for log lines."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
