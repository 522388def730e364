"""Preparation of an agent-mode run.

prepare_agent_mode() is the single coordinating operation: it authorizes the
actor, then resolves branches, assembles the agent arguments, creates the
prompt directory and writes the prompt files. Nothing touches the file system
until the actor is authorized. It performs no git mutation and starts no
process; the caller configures git and publishes the result afterwards.
"""

import logging
from pathlib import Path

from claude_prep.core.actor import authorize_actor
from claude_prep.core.branches import resolve_branches
from claude_prep.core.claude_args import assemble_args
from claude_prep.core.env_snapshot import EnvSnapshot
from claude_prep.core.invocation import InvocationContext, PreparedInvocation
from claude_prep.core.prompt_files import ensure_prompt_dir, write_prompts
from claude_prep.gateway.github_users.abc import GitHubUsers
from claude_prep.gateway.mcp_config.abc import McpConfigBuilder

logger = logging.getLogger(__name__)


def prepare_agent_mode(
    *,
    context: InvocationContext,
    github_users: GitHubUsers,
    github_token: str,
    env: EnvSnapshot,
    mcp_config_builder: McpConfigBuilder,
    prompt_dir: Path,
) -> PreparedInvocation:
    """Turn an invocation context into agent launch parameters.

    Args:
        context: Parsed triggering event
        github_users: Gateway for the actor lookup
        github_token: Token handed to the MCP configuration
        env: Environment snapshot taken at the CLI boundary
        mcp_config_builder: Builder for the MCP server configuration
        prompt_dir: Directory that receives the prompt files, created if missing

    Returns:
        PreparedInvocation for the launch step

    Raises:
        UnauthorizedActorError: If the actor may not trigger the agent
        IdentityLookupError: If the actor lookup fails
        OSError: If the prompt directory or files cannot be written
    """
    identity = authorize_actor(context, github_users)
    logger.debug("Preparing %s run for %s", context.event_name, identity.login)

    branch_info = resolve_branches(context, env)
    assembled = assemble_args(
        inputs=context.inputs,
        env=env,
        mcp_config_builder=mcp_config_builder,
        github_token=github_token,
    )
    ensure_prompt_dir(prompt_dir)
    write_prompts(context, prompt_dir)

    return PreparedInvocation(
        comment_id=context.comment_id,
        branch_info=branch_info,
        mcp_config=assembled.mcp_config,
        claude_args=assembled.claude_args,
    )
