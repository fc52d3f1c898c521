"""CLI command for fetching embedded resources."""

import asyncio
from pathlib import Path

from quickdict.cli.commands.common import build_config
from quickdict.interfaces import PresenterProtocol
from quickdict.orchestration import AppContext
from quickdict.presenters import ConsolePresenter


def asset_command(args) -> int:
    """Execute the asset subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = asset served, 1 = not found or failed)
    """
    config = build_config(args, use_online_fallback=False)
    presenter: PresenterProtocol = ConsolePresenter()

    if config.resource_dir is None:
        presenter.show_error("No resource directory given (use --resources)")
        return 1

    async def run():
        async with AppContext(config) as context:
            await context.ensure_store()
            return await context.protocol_server.serve(args.name)

    response = asyncio.run(run())
    presenter.show_asset_response(response)

    if not response.ok:
        return 1

    if args.output:
        output = Path(args.output)
        try:
            output.write_bytes(response.data)
        except OSError as e:
            presenter.show_error(f"Could not write {output}: {e}")
            return 1
        presenter.show_info(f"Saved to {output}")
    return 0
