"""PrepContext: every dependency a command needs, created once at the entry point."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from claude_prep.core.env_snapshot import EnvSnapshot
from claude_prep.gateway.gha_output.abc import GhaOutput
from claude_prep.gateway.git_auth.abc import GitAuth
from claude_prep.gateway.github_users.abc import GitHubUsers
from claude_prep.gateway.mcp_config.abc import McpConfigBuilder

GITHUB_TOKEN_VAR = "GITHUB_TOKEN"


@dataclass(frozen=True)
class PrepContext:
    """Immutable context holding all dependencies for claude-prep commands.

    Created at CLI entry point and threaded through the application via Click's
    context system. Tests build one from fakes with context_for_test().
    """

    # Gateway integrations
    github_users: GitHubUsers
    mcp_config_builder: McpConfigBuilder
    git_auth: GitAuth
    gha_output: GhaOutput

    # Environment snapshot taken at startup
    env: EnvSnapshot
    github_token: str | None

    # Paths
    cwd: Path


def create_context(environ: Mapping[str, str] | None = None) -> PrepContext:
    """Create the production context from the process environment."""
    from claude_prep.gateway.gha_output.real import RealGhaOutput
    from claude_prep.gateway.git_auth.real import RealGitAuth
    from claude_prep.gateway.github_users.real import RealGitHubUsers
    from claude_prep.gateway.mcp_config.real import RealMcpConfigBuilder

    source = environ if environ is not None else os.environ
    env = EnvSnapshot.from_environ(source)
    github_token = source.get(GITHUB_TOKEN_VAR) or None

    return PrepContext(
        github_users=RealGitHubUsers(github_token=github_token or ""),
        mcp_config_builder=RealMcpConfigBuilder(),
        git_auth=RealGitAuth(),
        gha_output=RealGhaOutput(
            github_output_path=env.github_output,
            github_env_path=env.github_env,
        ),
        env=env,
        github_token=github_token,
        cwd=Path.cwd(),
    )
