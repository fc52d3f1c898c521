"""Tests for html_presenter module."""

from quickdict.models import DefinitionResult, RemoteEntry, ResultKind
from quickdict.presenters.html_presenter import SPELLING_HINT, HtmlPresenter


class TestRenderDefinition:
    """Tests for the local definition template."""

    def test_contains_markup_and_title(self):
        result = DefinitionResult(display_word="run", kind=ResultKind.LOCAL, markup="<h2>run</h2>")

        html = HtmlPresenter().render(result)

        assert '<div class="word-title">run</div>' in html
        assert "<h2>run</h2>" in html
        assert "redirected from" not in html

    def test_redirect_flag(self):
        result = DefinitionResult(
            display_word="run",
            kind=ResultKind.LOCAL,
            markup="<h2>run</h2>",
            redirected_from="<running>",
        )

        html = HtmlPresenter().render(result)

        assert '(redirected from "&lt;running&gt;")' in html

    def test_display_settings_applied(self):
        presenter = HtmlPresenter(font_family="Noto Serif", font_size="18", line_height="2")
        result = DefinitionResult(display_word="run", kind=ResultKind.LOCAL)

        html = presenter.render_definition(result)

        assert "font-family: 'Noto Serif'" in html
        assert "font-size: 18px" in html
        assert "font-size: 24px" in html
        assert "line-height: 2;" in html

    def test_invalid_font_size_falls_back(self):
        assert HtmlPresenter(font_size="large").base_font_size == 14

    def test_font_family_cannot_break_out_of_style(self):
        presenter = HtmlPresenter(font_family="x'; }</style><script>")
        html = presenter.render_definition(DefinitionResult(display_word="a", kind=ResultKind.LOCAL))

        assert "<script>" not in html

    def test_css_content_embedded(self):
        presenter = HtmlPresenter(css_content=".pos { color: red; }")
        html = presenter.render_definition(DefinitionResult(display_word="a", kind=ResultKind.LOCAL))

        assert ".pos { color: red; }" in html


class TestRenderNotFound:
    """Tests for the not-found template."""

    def test_lists_suggestions(self):
        html = HtmlPresenter().render_not_found("cafx", ["cafe", "case", "cage"])

        assert "Not Found" in html
        for word in ("cafe", "case", "cage"):
            assert f'<span class="suggestion">{word}</span>' in html
        assert "Did you mean: <span" in html
        assert SPELLING_HINT not in html

    def test_hint_without_suggestions(self):
        for suggestions in ([], None):
            html = HtmlPresenter().render_not_found("cafx", suggestions)

            assert SPELLING_HINT in html
            assert "Did you mean" not in html

    def test_escapes_query(self):
        html = HtmlPresenter().render_not_found("<script>alert(1)</script>", None)

        assert "<script>" not in html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html


class TestRenderOtherKinds:
    """Tests for redirect-failed, error and online templates."""

    def test_redirect_failed_escapes_both_words(self):
        result = DefinitionResult(
            display_word="a&b",
            kind=ResultKind.REDIRECT_FAILED,
            query="a&b",
            missing_target='"c"',
        )

        html = HtmlPresenter().render(result)

        assert "Redirect Failed" in html
        assert "a&amp;b" in html
        assert "&quot;c&quot;" in html

    def test_error_escapes_message(self):
        result = DefinitionResult(
            display_word="run", kind=ResultKind.ERROR, query="run", error="<boom>"
        )

        html = HtmlPresenter().render(result)

        assert "&lt;boom&gt;" in html
        assert "<boom>" not in html

    def test_online_entry_escapes_remote_text(self):
        entry = RemoteEntry.from_json(
            {
                "word": "x<y",
                "phonetic": "/x/",
                "meanings": [
                    {
                        "partOfSpeech": "noun",
                        "definitions": [{"definition": "<img src=x onerror=1>", "example": "e.g."}],
                        "synonyms": ["s1"],
                    }
                ],
            }
        )

        html = HtmlPresenter().render_online_entry(entry)

        assert "x&lt;y" in html
        assert "<img" not in html
        assert '<div class="phonetic">/x/</div>' in html
        assert '"e.g."' in html
        assert "Synonyms: <span>s1</span>" in html

    def test_online_entry_with_numeric_fields(self):
        entry = RemoteEntry.from_json(
            {
                "word": "pi",
                "phonetic": 3.14,
                "meanings": [
                    {"partOfSpeech": "noun", "definitions": [{"definition": "A ratio.", "example": 22}]}
                ],
            }
        )

        html = HtmlPresenter().render_online_entry(entry)

        assert '<div class="phonetic">3.14</div>' in html
        assert '"22"' in html

    def test_online_result_rendered_as_is(self):
        result = DefinitionResult(display_word="run", kind=ResultKind.ONLINE, markup="<p>ok</p>")
        assert HtmlPresenter().render(result) == "<p>ok</p>"
