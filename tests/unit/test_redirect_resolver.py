"""Tests for redirect_resolver module."""

from quickdict.models import ResultKind
from quickdict.services.redirect_resolver import RedirectResolver, find_redirect_target


class TestFindRedirectTarget:
    """Tests for alias marker parsing."""

    def test_no_marker(self):
        assert find_redirect_target("<h2>run</h2>") is None

    def test_simple_marker(self):
        assert find_redirect_target("@@@LINK=run") == "run"

    def test_target_with_spaces(self):
        assert find_redirect_target("@@@LINK=ice cream") == "ice cream"

    def test_stops_at_tag(self):
        assert find_redirect_target("@@@LINK= go off <br>rest") == "go off"

    def test_stops_at_line_break_and_strips_padding(self):
        assert find_redirect_target("@@@LINK=run\r\n\x00") == "run"

    def test_case_insensitive_marker(self):
        assert find_redirect_target("@@@link=run") == "run"

    def test_empty_target(self):
        assert find_redirect_target("@@@LINK=<br>") is None


class TestRedirectResolver:
    """Tests for RedirectResolver.resolve."""

    def test_plain_entry(self, fake_index):
        resolver = RedirectResolver(fake_index)

        result = resolver.resolve("runner", fake_index.entries["runner"])

        assert result.kind == ResultKind.LOCAL
        assert result.display_word == "runner"
        assert result.redirected_from is None
        assert fake_index.lookups == []

    def test_redirect_to_existing_target(self, fake_index):
        resolver = RedirectResolver(fake_index)

        result = resolver.resolve("running", "@@@LINK=run")

        assert result.kind == ResultKind.LOCAL
        assert result.display_word == "run"
        assert result.redirected_from == "running"
        assert result.markup == fake_index.entries["run"]
        assert fake_index.lookups == ["run"]

    def test_redirect_to_missing_target(self, fake_index):
        resolver = RedirectResolver(fake_index)

        result = resolver.resolve("gone", "@@@LINK=go")

        assert result.kind == ResultKind.REDIRECT_FAILED
        assert result.display_word == "gone"
        assert result.missing_target == "go"
        assert fake_index.lookups == ["go"]

    def test_single_hop_by_default(self, make_index):
        index = make_index({"a": "@@@LINK=b", "b": "@@@LINK=c", "c": "<p>c</p>"})
        resolver = RedirectResolver(index)

        result = resolver.resolve("a", index.entries["a"])

        assert result.display_word == "b"
        assert result.markup == "@@@LINK=c"
        assert index.lookups == ["b"]

    def test_multi_hop_when_configured(self, make_index):
        index = make_index({"a": "@@@LINK=b", "b": "@@@LINK=c", "c": "<p>c</p>"})
        resolver = RedirectResolver(index, max_hops=3)

        result = resolver.resolve("a", index.entries["a"])

        assert result.display_word == "c"
        assert result.markup == "<p>c</p>"
        assert result.redirected_from == "a"

    def test_cycle_terminates(self, make_index):
        index = make_index({"a": "@@@LINK=b", "b": "@@@LINK=a"})
        resolver = RedirectResolver(index, max_hops=10)

        result = resolver.resolve("a", index.entries["a"])

        assert result.kind == ResultKind.LOCAL
        assert result.display_word == "b"
        assert index.lookups == ["b"]

    def test_self_link_terminates(self, make_index):
        index = make_index({"a": "@@@LINK=a"})
        resolver = RedirectResolver(index, max_hops=10)

        result = resolver.resolve("a", index.entries["a"])

        assert result.display_word == "a"
        assert result.redirected_from is None
        assert index.lookups == []

    def test_zero_hops_disables_redirects(self, fake_index):
        resolver = RedirectResolver(fake_index, max_hops=0)

        result = resolver.resolve("running", "@@@LINK=run")

        assert result.display_word == "running"
        assert result.markup == "@@@LINK=run"
        assert fake_index.lookups == []
