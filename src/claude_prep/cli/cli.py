import logging

import click

from claude_prep.cli.commands.prepare_agent_cmd import prepare_agent
from claude_prep.context.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="claude-prep")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Prepare Claude agent runs inside GitHub Actions jobs."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()


cli.add_command(prepare_agent)


def main() -> None:
    """CLI entry point used by the `claude-prep` console script."""
    cli()
