"""Default configuration values for QuickDict."""

from .config import QuickDictConfig


def create_default_config(**overrides) -> QuickDictConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        QuickDictConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            dictionary_path="~/dicts/oald9.json",
            resource_cache_capacity=64,
        )
    """
    return QuickDictConfig(**overrides)
