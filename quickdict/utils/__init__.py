"""Utility functions for QuickDict."""

from .resource_utils import (
    ASSET_SCHEME,
    derive_identifier,
    infer_mime_type,
    is_canonical_reference,
    is_external_reference,
    strip_asset_scheme,
)
from .text_utils import is_ascii_word, make_brief, normalize_query, strip_markup

__all__ = [
    "ASSET_SCHEME",
    "derive_identifier",
    "infer_mime_type",
    "is_canonical_reference",
    "is_external_reference",
    "strip_asset_scheme",
    "normalize_query",
    "is_ascii_word",
    "strip_markup",
    "make_brief",
]
