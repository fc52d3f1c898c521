"""Helpers for canonical resource identifiers and MIME types."""

ASSET_SCHEME = "asset://"

MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".ogg": "audio/ogg",
    ".css": "text/css",
    ".js": "application/javascript",
}
DEFAULT_MIME_TYPE = "application/octet-stream"


def derive_identifier(reference: str) -> str:
    """Derive the canonical identifier for a raw resource reference.

    Only the basename survives, so ``img/a.png``, ``\\img\\a.png`` and
    ``../../a.png`` all map to ``a.png``. Applying the function to its own
    output returns the same value.

    Args:
        reference: Raw reference path as found in definition markup

    Returns:
        Canonical identifier (basename with no separators)
    """
    normalized = strip_asset_scheme(reference.strip()).replace("\\", "/")
    segments = [segment for segment in normalized.split("/") if segment]
    return segments[-1] if segments else ""


def strip_asset_scheme(reference: str) -> str:
    """Remove a leading ``asset://`` from a reference, if present."""
    if reference.lower().startswith(ASSET_SCHEME):
        return reference[len(ASSET_SCHEME) :]
    return reference


def is_canonical_reference(reference: str) -> bool:
    """Check if a reference already uses the asset scheme."""
    return reference.strip().lower().startswith(ASSET_SCHEME)


def is_external_reference(reference: str) -> bool:
    """Check if a reference is absolute (web URL or inline data URI)."""
    lowered = reference.strip().lower()
    return lowered.startswith(("http://", "https://", "data:"))


def infer_mime_type(identifier: str) -> str:
    """Infer the MIME type of a resource from its extension.

    Args:
        identifier: Canonical resource identifier

    Returns:
        MIME type from the allow-list, or the generic binary type
    """
    dot = identifier.rfind(".")
    if dot == -1:
        return DEFAULT_MIME_TYPE
    return MIME_TYPES.get(identifier[dot:].lower(), DEFAULT_MIME_TYPE)
