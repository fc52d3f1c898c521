"""Text processing utilities."""

import html
import re

_TAG_RE = re.compile(r"<[^>]+>")
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")
_ASCII_WORD_RE = re.compile(r"^[A-Za-z'\-]+$")
_SENTENCE_BREAK_RE = re.compile(r"[。.;；]")


def normalize_query(text: str | None) -> str:
    """Trim a raw query, preserving case.

    Args:
        text: Raw user input (may be None)

    Returns:
        Trimmed query, empty string for None
    """
    if not text:
        return ""
    return text.strip()


def is_ascii_word(text: str) -> bool:
    """Check if text looks like a plain English word.

    Only ASCII letters, hyphens and apostrophes are accepted; this is the
    shape of query the online fallback service understands.
    """
    return bool(_ASCII_WORD_RE.match(text))


def strip_markup(text: str) -> str:
    """Remove HTML tags, decode entities and normalize whitespace.

    Args:
        text: Definition markup

    Returns:
        Plain single-line text
    """
    text = _TAG_RE.sub(" ", text)
    text = html.unescape(text)
    text = _CONTROL_RE.sub(" ", text)
    return " ".join(text.split())


def make_brief(markup: str, limit: int = 100) -> str:
    """Build a one-line summary of a definition for search result lists.

    The first sentence (up to ``。 . ; ；``) of the plain text is kept
    and hard-truncated to ``limit`` characters.

    Args:
        markup: Definition markup
        limit: Maximum length before an ellipsis is appended

    Returns:
        Brief text, possibly empty
    """
    text = strip_markup(markup)
    text = _SENTENCE_BREAK_RE.split(text, maxsplit=1)[0].strip()
    if len(text) > limit:
        return f"{text[:limit]}..."
    return text
