"""Tests for resource_utils module."""

import pytest

from quickdict.utils.resource_utils import (
    derive_identifier,
    infer_mime_type,
    is_canonical_reference,
    is_external_reference,
)


class TestDeriveIdentifier:
    """Tests for derive_identifier."""

    @pytest.mark.parametrize(
        "reference",
        [
            "run.png",
            "images/run.png",
            "/images/run.png",
            "\\images\\run.png",
            "..\\..\\img\\run.png",
            "a/b\\c/d/run.png",
            "asset://run.png",
        ],
    )
    def test_same_basename_same_identifier(self, reference):
        """Any slash style or directory depth should reduce to the basename."""
        assert derive_identifier(reference) == "run.png"

    def test_idempotent(self):
        """Deriving from an identifier should return it unchanged."""
        once = derive_identifier("x\\y/z/sound file.mp3")
        assert derive_identifier(once) == once == "sound file.mp3"

    def test_trailing_separator_uses_last_segment(self):
        """A trailing separator should not produce an empty identifier."""
        assert derive_identifier("images/run.png/") == "run.png"

    def test_sound_scheme_reduced_to_basename(self):
        """MDX style sound:// references keep only the file name."""
        assert derive_identifier("sound://uk/run.mp3") == "run.mp3"

    def test_empty_reference(self):
        assert derive_identifier("") == ""
        assert derive_identifier("///") == ""


class TestReferenceKinds:
    """Tests for external/canonical reference checks."""

    def test_external_references(self):
        assert is_external_reference("http://example.com/a.png") is True
        assert is_external_reference("HTTPS://example.com/a.png") is True
        assert is_external_reference("data:image/png;base64,AAAA") is True
        assert is_external_reference("images/a.png") is False

    def test_canonical_references(self):
        assert is_canonical_reference("asset://a.png") is True
        assert is_canonical_reference("images/a.png") is False


class TestInferMimeType:
    """Tests for infer_mime_type."""

    @pytest.mark.parametrize(
        ("identifier", "expected"),
        [
            ("a.png", "image/png"),
            ("a.jpg", "image/jpeg"),
            ("a.JPEG", "image/jpeg"),
            ("a.gif", "image/gif"),
            ("a.svg", "image/svg+xml"),
            ("a.mp3", "audio/mpeg"),
            ("a.wav", "audio/wav"),
            ("a.ogg", "audio/ogg"),
            ("style.css", "text/css"),
            ("script.js", "application/javascript"),
        ],
    )
    def test_allow_list(self, identifier, expected):
        assert infer_mime_type(identifier) == expected

    def test_unknown_extension_is_binary(self):
        assert infer_mime_type("font.ttf") == "application/octet-stream"

    def test_no_extension_is_binary(self):
        assert infer_mime_type("README") == "application/octet-stream"
