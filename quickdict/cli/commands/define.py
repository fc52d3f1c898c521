"""CLI command for looking up a single word."""

import asyncio

from quickdict.cli.commands.common import build_config
from quickdict.interfaces import PresenterProtocol
from quickdict.models import ResultKind
from quickdict.orchestration import AppContext, LookupOrchestrator
from quickdict.presenters import ConsolePresenter


def define_command(args) -> int:
    """Execute the define subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = definition found, 1 = otherwise)
    """
    config = build_config(args)
    presenter: PresenterProtocol = ConsolePresenter()

    async def run():
        async with AppContext(config) as context:
            orchestrator = LookupOrchestrator(context)
            if args.online:
                return await orchestrator.define_remote(args.word)
            return await orchestrator.define(args.word)

    result = asyncio.run(run())
    presenter.show_lookup_result(result)

    if result.kind == ResultKind.ERROR:
        presenter.show_error(result.result.error or "Lookup failed")
    return 0 if result.result.found else 1
