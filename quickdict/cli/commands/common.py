"""Shared helpers for CLI commands."""

from quickdict.config import QuickDictConfig, create_default_config


def build_config(args, **overrides) -> QuickDictConfig:
    """Create a configuration from global command-line options.

    Args:
        args: Parsed command-line arguments
        **overrides: Extra configuration overrides

    Returns:
        Configuration with the given paths applied
    """
    if getattr(args, "dictionary", None):
        overrides["dictionary_path"] = args.dictionary
    if getattr(args, "resources", None):
        overrides["resource_dir"] = args.resources
    if getattr(args, "css", None):
        overrides["css_path"] = args.css
    return create_default_config(**overrides)
