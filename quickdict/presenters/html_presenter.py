"""HTML presentation templates for lookup results."""

import html
import re

from quickdict.models import DefinitionResult, RemoteEntry, ResultKind

SPELLING_HINT = "Please check your spelling"
ONLINE_SOURCE_LABEL = "Source: Free Dictionary API (online)"

_UNSAFE_CSS_CHARS_RE = re.compile(r"[\"'<>;{}\\]")


def escape(text: str) -> str:
    """Escape user- or service-controlled text for interpolation into HTML."""
    return html.escape(text, quote=True)


def _css_value(value: str) -> str:
    return _UNSAFE_CSS_CHARS_RE.sub("", value)


class HtmlPresenter:
    """Render definition results as self-contained HTML fragments.

    Display settings only affect styling; they never change definition
    content or asset addressing.
    """

    def __init__(
        self,
        font_family: str = "Segoe UI",
        font_size: str = "14",
        line_height: str = "1.6",
        css_content: str = "",
    ):
        """Initialize the presenter.

        Args:
            font_family: Font family of definition text
            font_size: Base font size in pixels (string, as stored in settings)
            line_height: CSS line height
            css_content: Dictionary-specific stylesheet to embed
        """
        self.font_family = font_family
        self.font_size = font_size
        self.line_height = line_height
        self.css_content = css_content

    @property
    def base_font_size(self) -> int:
        try:
            return int(float(self.font_size))
        except (TypeError, ValueError):
            return 14

    def render(self, result: DefinitionResult) -> str:
        """Render any result kind.

        Args:
            result: Definition result to render

        Returns:
            HTML fragment
        """
        if result.kind == ResultKind.LOCAL:
            return self.render_definition(result)
        if result.kind == ResultKind.ONLINE:
            return result.markup
        if result.kind == ResultKind.REDIRECT_FAILED:
            return self.render_redirect_failed(result.query, result.missing_target or "")
        if result.kind == ResultKind.NOT_FOUND:
            return self.render_not_found(result.query or result.display_word, result.suggestions)
        return self.render_error(result.query or result.display_word, result.error or "")

    def render_definition(self, result: DefinitionResult) -> str:
        """Wrap local definition markup in the styled content template."""
        size = self.base_font_size
        redirect_info = ""
        if result.redirected_from:
            redirect_info = (
                f'<div class="redirect-info">(redirected from "{escape(result.redirected_from)}")</div>'
            )

        return f"""
<style>
  .dict-content {{
    font-family: '{_css_value(self.font_family)}', -apple-system, BlinkMacSystemFont, sans-serif;
    font-size: {size}px;
    line-height: {_css_value(self.line_height)};
    color: #e0e0e0;
  }}
  .dict-content h2 {{ color: #4fc3f7; border-bottom: 2px solid #4fc3f7; padding-bottom: 5px; }}
  .dict-content .word-title {{
    font-size: {size + 6}px;
    font-weight: bold;
    color: #fff;
    margin-bottom: 10px;
  }}
  .dict-content .redirect-info {{
    font-size: {size - 2}px;
    color: #888;
    margin-bottom: 10px;
    font-style: italic;
  }}
  {self.css_content}
  .dict-content img {{ max-width: 100%; height: auto; }}
  .dict-content table {{ border-collapse: collapse; max-width: 100%; font-size: {size - 1}px; }}
  .dict-content a {{ color: #6af !important; text-decoration: none; }}
  .dict-content .pos, .dict-content .gram {{ color: #6c9 !important; }}
  .dict-content .phon {{ color: #888 !important; }}
  .dict-content .x, .dict-content .example {{ color: #aaa !important; font-style: italic; }}
</style>
<div class="dict-content">
  <div class="word-title">{escape(result.display_word)}</div>
  {redirect_info}
  {result.markup}
</div>
"""

    def render_not_found(self, word: str, suggestions: list[str] | None) -> str:
        """Render the not-found block with "did you mean" suggestions.

        Args:
            word: Query that was not found
            suggestions: Suggested headwords; None or empty shows a hint instead
        """
        if suggestions:
            items = ", ".join(
                f'<span class="suggestion">{escape(suggestion)}</span>' for suggestion in suggestions
            )
            hint = f"Did you mean: {items}"
        else:
            hint = SPELLING_HINT

        return f"""
<div class="not-found">
  <h3>Not Found</h3>
  <p>Word "<strong>{escape(word)}</strong>" not found in dictionary.</p>
  <p class="hint" style="color: #666; font-size: 12px; margin-top: 10px;">
    {hint}
  </p>
</div>
"""

    def render_redirect_failed(self, word: str, target: str) -> str:
        """Render the block shown when an alias points to a missing headword."""
        return f"""
<div class="not-found">
  <h3>Redirect Failed</h3>
  <p>Word "<strong>{escape(word)}</strong>" redirects to "<strong>{escape(target)}</strong>", but the target word was not found.</p>
</div>
"""

    def render_error(self, word: str, message: str) -> str:
        """Render the in-band error block."""
        return f"""
<div class="error">
  <h3>Error</h3>
  <p>Failed to lookup word: {escape(word)}</p>
  <p style="color: #666; font-size: 12px;">{escape(message)}</p>
</div>
"""

    def render_online_entry(self, entry: RemoteEntry) -> str:
        """Render a self-contained page for an online dictionary entry.

        Shows phonetics, up to 4 definitions (with example) per part of
        speech, up to 5 synonyms per part of speech, and the source label.
        """
        parts = [
            '<div class="online-entry">',
            '<div class="word-header">',
            f'<div class="word-title">{escape(entry.word)}</div>',
        ]

        if entry.phonetics:
            items = "".join(
                f'<span class="phonetic-item">{escape(text)}</span>' for text in entry.phonetics
            )
            parts.append(f'<div class="phonetic">{items}</div>')
        elif entry.phonetic:
            parts.append(f'<div class="phonetic">{escape(entry.phonetic)}</div>')
        parts.append("</div>")

        for meaning in entry.meanings:
            parts.append('<div class="meaning-section">')
            parts.append(f'<span class="part-of-speech">{escape(meaning.part_of_speech)}</span>')
            parts.append('<ul class="definition-list">')
            for definition in meaning.definitions[:4]:
                example = ""
                if definition.example:
                    example = f'<div class="example">"{escape(definition.example)}"</div>'
                parts.append(
                    f'<li class="definition-item">'
                    f'<div class="definition-text">{escape(definition.definition)}</div>'
                    f"{example}</li>"
                )
            parts.append("</ul>")
            if meaning.synonyms:
                synonyms = ", ".join(escape(s) for s in meaning.synonyms[:5])
                parts.append(f'<div class="synonyms">Synonyms: <span>{synonyms}</span></div>')
            parts.append("</div>")

        parts.append(f'<div class="source-info">{ONLINE_SOURCE_LABEL}</div>')
        parts.append("</div>")
        return "\n".join(parts)
