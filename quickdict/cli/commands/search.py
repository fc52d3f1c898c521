"""CLI command for searching headwords."""

import asyncio

from quickdict.cli.commands.common import build_config
from quickdict.interfaces import PresenterProtocol
from quickdict.orchestration import AppContext, LookupOrchestrator
from quickdict.presenters import ConsolePresenter


def search_command(args) -> int:
    """Execute the search subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = at least one candidate, 1 = none)
    """
    config = build_config(args, use_online_fallback=not args.no_online)
    presenter: PresenterProtocol = ConsolePresenter()

    async def run():
        async with AppContext(config) as context:
            return await LookupOrchestrator(context).search(args.query)

    candidates = asyncio.run(run())
    presenter.show_search_results(args.query, candidates)
    return 0 if candidates else 1
