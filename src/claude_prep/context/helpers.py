"""Accessors for PrepContext members inside click commands."""

import click

from claude_prep.context.context import GITHUB_TOKEN_VAR, PrepContext


def require_context(ctx: click.Context) -> PrepContext:
    """Return the PrepContext stored on ctx.obj.

    Raises:
        click.ClickException: If the command was invoked without a context
    """
    if not isinstance(ctx.obj, PrepContext):
        raise click.ClickException("claude-prep context not initialized")
    return ctx.obj


def require_github_token(ctx: click.Context) -> str:
    """Return the workflow token, failing the command when it is missing."""
    prep_ctx = require_context(ctx)
    if prep_ctx.github_token is None:
        raise click.ClickException(f"{GITHUB_TOKEN_VAR} is not set")
    return prep_ctx.github_token
