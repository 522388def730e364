#!/usr/bin/env python3
"""Prepare an agent-mode Claude run in a GitHub Actions job.

This command authorizes the triggering actor, resolves branches, assembles
the agent's argument string and writes the prompt files. On success it
configures git credentials (unless commits are signed through the API) and
publishes the results as step outputs for the step that launches the agent.

Usage:
    claude-prep prepare-agent

    Every option falls back to the environment variable shown in --help, so
    inside a workflow the command usually runs without arguments.

Output:
    JSON object with success status and the prepared invocation

Exit Codes:
    0: Success (invocation prepared)
    1: Error (actor rejected, GitHub/git command failed, or prompt write failed)

Examples:
    $ CLAUDE_ARGS="--max-turns 10" claude-prep prepare-agent --prompt "/review"
    {
      "success": true,
      "comment_id": null,
      "branch_info": {
        "base_branch": "main",
        "current_branch": "main",
        "claude_branch": null
      },
      "mcp_config": "{\"mcpServers\": {}}",
      "claude_args": "--max-turns 10",
      "prompt_dir": "/home/runner/work/_temp/claude-prompts"
    }

    $ GITHUB_ACTOR="renovate[bot]" claude-prep prepare-agent
    {
      "success": false,
      "error": "unauthorized-actor",
      "message": "Workflow initiated by non-human actor: renovate (type: Bot). ..."
    }
"""

import json
import logging
from dataclasses import asdict, dataclass
from typing import Any, Literal, NoReturn

import click

from claude_prep.context.context import PrepContext
from claude_prep.context.helpers import require_context, require_github_token
from claude_prep.core.actor import UnauthorizedActorError
from claude_prep.core.agent_mode import prepare_agent_mode
from claude_prep.core.invocation import (
    DEFAULT_BRANCH_PREFIX,
    InvocationContext,
    InvocationInputs,
    PreparedInvocation,
    Repository,
)
from claude_prep.core.prompt_files import prompt_dir_for
from claude_prep.gateway.github_users.abc import IdentityLookupError

logger = logging.getLogger(__name__)

PROMPT_DIR_VAR = "CLAUDE_PROMPT_DIR"
REDACTED = "***"

ErrorKind = Literal[
    "unauthorized-actor",
    "identity-lookup-failed",
    "git-auth-failed",
    "output-export-failed",
    "prompt-write-failed",
]


@dataclass(frozen=True)
class PrepareError:
    """Error result when preparation fails."""

    success: Literal[False]
    error: ErrorKind
    message: str


def _publish(prep_ctx: PrepContext, prepared: PreparedInvocation, prompt_dir: str) -> None:
    """Publish the prepared invocation to later workflow steps."""
    outputs = prep_ctx.gha_output
    outputs.set_output("base_branch", prepared.branch_info.base_branch)
    outputs.set_output("current_branch", prepared.branch_info.current_branch)
    if prepared.branch_info.claude_branch is not None:
        outputs.set_output("claude_branch", prepared.branch_info.claude_branch)
    outputs.set_output("claude_args", prepared.claude_args)
    outputs.set_output("mcp_config", prepared.mcp_config)
    outputs.set_output("prompt_dir", prompt_dir)
    outputs.export_variable(PROMPT_DIR_VAR, prompt_dir)


def _redact(value: str, secret: str) -> str:
    return value.replace(secret, REDACTED) if secret else value


def _fail(error: ErrorKind, message: str) -> NoReturn:
    result = PrepareError(success=False, error=error, message=message)
    click.echo(f"::error::{message}", err=True)
    click.echo(json.dumps(asdict(result), indent=2))
    raise SystemExit(1)


@click.command(name="prepare-agent")
@click.option("--event-name", envvar="GITHUB_EVENT_NAME", required=True, help="Triggering event")
@click.option("--actor", envvar="GITHUB_ACTOR", required=True, help="Triggering account login")
@click.option(
    "--repository",
    envvar="GITHUB_REPOSITORY",
    required=True,
    help="Repository in owner/repo format",
)
@click.option("--prompt", envvar="PROMPT", default="", help="User request for the agent")
@click.option("--allowed-bots", envvar="ALLOWED_BOTS", default="", help="Bots allowed to trigger")
@click.option(
    "--allowed-tools", envvar="ALLOWED_TOOLS", default="", help="Tools enabled for the agent"
)
@click.option("--base-branch", envvar="BASE_BRANCH", default="", help="Explicit base branch")
@click.option(
    "--branch-prefix",
    envvar="BRANCH_PREFIX",
    default=DEFAULT_BRANCH_PREFIX,
    help="Prefix for agent work branches",
)
@click.option(
    "--comment-id", envvar="CLAUDE_COMMENT_ID", type=int, default=None, help="Tracking comment ID"
)
@click.option(
    "--entity-number",
    envvar="CLAUDE_ENTITY_NUMBER",
    type=int,
    default=None,
    help="Issue or PR number for comment-triggered events",
)
@click.option(
    "--use-commit-signing",
    envvar="USE_COMMIT_SIGNING",
    is_flag=True,
    help="Skip git credential setup; commits are created through the API",
)
@click.option(
    "--github-token",
    envvar="GITHUB_TOKEN",
    default=None,
    help="Token for the MCP server and git remote (defaults to the context token)",
)
@click.pass_context
def prepare_agent(
    ctx: click.Context,
    *,
    event_name: str,
    actor: str,
    repository: str,
    prompt: str,
    allowed_bots: str,
    allowed_tools: str,
    base_branch: str,
    branch_prefix: str,
    comment_id: int | None,
    entity_number: int | None,
    use_commit_signing: bool,
    github_token: str | None,
) -> None:
    """Prepare the launch parameters for an agent-mode run.

    Writes the prompt files to <RUNNER_TEMP>/claude-prompts and publishes
    branches, agent arguments and MCP config as step outputs.
    """
    prep_ctx = require_context(ctx)
    if not github_token:
        github_token = require_github_token(ctx)

    try:
        repo = Repository.parse(repository)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--repository") from e

    context = InvocationContext(
        event_name=event_name,
        actor=actor,
        repository=repo,
        inputs=InvocationInputs(
            prompt=prompt,
            allowed_bots=allowed_bots,
            allowed_tools=allowed_tools,
            base_branch=base_branch,
            branch_prefix=branch_prefix,
            use_commit_signing=use_commit_signing,
        ),
        comment_id=comment_id,
        entity_number=entity_number,
    )

    prompt_dir = prompt_dir_for(prep_ctx.env)
    try:
        prepared = prepare_agent_mode(
            context=context,
            github_users=prep_ctx.github_users,
            github_token=github_token,
            env=prep_ctx.env,
            mcp_config_builder=prep_ctx.mcp_config_builder,
            prompt_dir=prompt_dir,
        )
    except UnauthorizedActorError as e:
        _fail("unauthorized-actor", str(e))
    except IdentityLookupError as e:
        _fail("identity-lookup-failed", str(e))
    except OSError as e:
        _fail("prompt-write-failed", f"Failed to write prompt files to {prompt_dir}: {e}")

    if use_commit_signing:
        logger.debug("Commit signing enabled, skipping git credential setup")
    else:
        try:
            prep_ctx.git_auth.configure(
                github_token=github_token, repository=repo, cwd=prep_ctx.cwd
            )
        except RuntimeError as e:
            _fail("git-auth-failed", str(e))

    try:
        _publish(prep_ctx, prepared, str(prompt_dir))
    except (RuntimeError, OSError, ValueError) as e:
        _fail("output-export-failed", str(e))

    result: dict[str, Any] = {
        "success": True,
        **prepared.to_json_dict(),
        "mcp_config": _redact(prepared.mcp_config, github_token),
        "claude_args": _redact(prepared.claude_args, github_token),
        "prompt_dir": str(prompt_dir),
    }
    click.echo(json.dumps(result, indent=2))
