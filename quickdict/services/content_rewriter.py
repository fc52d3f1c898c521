"""Rewriting of embedded asset references in definition markup."""

import re

from quickdict.utils.resource_utils import (
    ASSET_SCHEME,
    derive_identifier,
    is_canonical_reference,
    is_external_reference,
)

# A tag never spans into another tag, so unterminated tags are left alone
_IMG_TAG_RE = re.compile(r"<img\b[^<>]*>", re.IGNORECASE)
_ANCHOR_TAG_RE = re.compile(r"<a\b[^<>]*>", re.IGNORECASE)
_TAG_NAME_RE = re.compile(r"<\w+")
_ATTRIBUTE_RE = re.compile(
    r"""(?P<name>[^\s"'=<>/]+)"""
    r"""(?:\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<uq>[^\s"'=<>`]+)))?"""
)

AUDIO_EXTENSIONS = (".mp3", ".wav", ".ogg")
AUDIO_MARKER = 'data-audio="true"'


def _find_attribute(tag: str, name: str) -> tuple[int, int, str, str] | None:
    """Locate an attribute value inside a single tag.

    Args:
        tag: Complete tag text, e.g. ``<img class="x" src="a.png">``
        name: Attribute name (case-insensitive)

    Returns:
        (value_start, value_end, value, quote) with offsets relative to
        ``tag`` and ``quote`` empty for unquoted values, or None if absent
    """
    name_match = _TAG_NAME_RE.match(tag)
    if name_match is None:
        return None
    body_start = name_match.end()

    for match in _ATTRIBUTE_RE.finditer(tag, body_start, len(tag) - 1):
        if match.group("name").lower() != name:
            continue
        for group, quote in (("dq", '"'), ("sq", "'"), ("uq", "")):
            value = match.group(group)
            if value is not None:
                return match.start(group), match.end(group), value, quote
        return None
    return None


def _needs_rewrite(reference: str) -> bool:
    return bool(reference.strip()) and not (
        is_external_reference(reference) or is_canonical_reference(reference)
    )


def _replace_value(tag: str, start: int, end: int, quote: str, value: str) -> str:
    if quote:
        return tag[:start] + value + tag[end:]
    return f'{tag[:start]}"{value}"{tag[end:]}'


class ContentRewriter:
    """Rewrite relative image and audio references to ``asset://`` URLs.

    Rewriting is idempotent: canonical and absolute references are never
    touched, and the audio marker is only added once.
    """

    def rewrite(self, markup: str) -> str:
        """Rewrite every relative asset reference in the markup.

        Args:
            markup: Definition markup (may be malformed)

        Returns:
            Markup with canonical asset references
        """
        if not markup:
            return markup
        markup = _IMG_TAG_RE.sub(self._rewrite_image, markup)
        markup = _ANCHOR_TAG_RE.sub(self._rewrite_audio, markup)
        return markup

    @staticmethod
    def _rewrite_image(match: re.Match) -> str:
        tag = match.group(0)
        found = _find_attribute(tag, "src")
        if found is None:
            return tag

        start, end, src, quote = found
        if not _needs_rewrite(src):
            return tag

        identifier = derive_identifier(src)
        if not identifier:
            return tag
        return _replace_value(tag, start, end, quote, f"{ASSET_SCHEME}{identifier}")

    @staticmethod
    def _rewrite_audio(match: re.Match) -> str:
        tag = match.group(0)
        found = _find_attribute(tag, "href")
        if found is None:
            return tag

        start, end, href, quote = found
        if not href.strip().lower().endswith(AUDIO_EXTENSIONS) or not _needs_rewrite(href):
            return tag

        identifier = derive_identifier(href)
        if not identifier:
            return tag

        tag = _replace_value(tag, start, end, quote, f"{ASSET_SCHEME}{identifier}")
        if _find_attribute(tag, "data-audio") is None:
            close = len(tag) - 2 if tag.endswith("/>") else len(tag) - 1
            tag = f"{tag[:close].rstrip()} {AUDIO_MARKER}{tag[close:]}"
        return tag
