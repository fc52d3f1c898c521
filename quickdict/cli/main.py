"""Main CLI entry point for quickdict."""

import argparse
import logging
import sys

from quickdict import __version__
from quickdict.cli.commands import asset, define, search


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="quickdict",
        description="Pop-up dictionary lookups with online fallback",
        epilog="Use 'quickdict <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--dictionary", help="Path to the dictionary JSON file")
    parser.add_argument("--resources", help="Directory holding the dictionary's images and audio")
    parser.add_argument("--css", help="Dictionary stylesheet to embed in definitions")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # quickdict define <word>
    define_parser = subparsers.add_parser(
        "define",
        help="Show the definition of a word",
        description="Look up a word and print the rendered definition HTML",
    )
    define_parser.add_argument("word", help="Word to look up")
    define_parser.add_argument(
        "--online",
        action="store_true",
        help="Use the online dictionary instead of the local one",
    )

    # quickdict search <query>
    search_parser = subparsers.add_parser(
        "search",
        help="Search headwords by prefix",
        description="List matching headwords, topped up with online results",
    )
    search_parser.add_argument("query", help="Search text")
    search_parser.add_argument(
        "--no-online",
        action="store_true",
        help="Do not query the online dictionary",
    )

    # quickdict asset <name>
    asset_parser = subparsers.add_parser(
        "asset",
        help="Fetch an embedded image or audio resource",
        description="Resolve an asset:// URL or resource name through the asset server",
    )
    asset_parser.add_argument("name", help="asset:// URL or resource file name")
    asset_parser.add_argument("-o", "--output", help="Write the resource bytes to this file")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Dispatch to appropriate command
    if args.command == "define":
        return define.define_command(args)
    elif args.command == "search":
        return search.search_command(args)
    elif args.command == "asset":
        return asset.asset_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
