"""Test factory for creating PrepContext instances backed by fakes."""

from pathlib import Path

from claude_prep.context.context import PrepContext
from claude_prep.core.env_snapshot import EnvSnapshot
from claude_prep.gateway.gha_output.abc import GhaOutput
from claude_prep.gateway.git_auth.abc import GitAuth
from claude_prep.gateway.github_users.abc import GitHubUsers
from claude_prep.gateway.mcp_config.abc import McpConfigBuilder


def context_for_test(
    github_users: GitHubUsers | None = None,
    mcp_config_builder: McpConfigBuilder | None = None,
    git_auth: GitAuth | None = None,
    gha_output: GhaOutput | None = None,
    env: EnvSnapshot | None = None,
    github_token: str | None = "test-token",
    cwd: Path | None = None,
) -> PrepContext:
    """Create test context with optional pre-configured implementations.

    Unspecified gateways default to fakes, so no subprocess or file write
    leaves the test. The default actor "test-user" resolves to a human.

    Example:
        >>> from claude_prep.gateway.github_users.fake import FakeGitHubUsers
        >>> ctx = context_for_test(github_users=FakeGitHubUsers.with_bot("renovate[bot]"))
    """
    from claude_prep.gateway.gha_output.fake import FakeGhaOutput
    from claude_prep.gateway.git_auth.fake import FakeGitAuth
    from claude_prep.gateway.github_users.fake import FakeGitHubUsers
    from claude_prep.gateway.mcp_config.fake import FakeMcpConfigBuilder

    return PrepContext(
        github_users=(
            github_users if github_users is not None else FakeGitHubUsers.with_human("test-user")
        ),
        mcp_config_builder=(
            mcp_config_builder if mcp_config_builder is not None else FakeMcpConfigBuilder()
        ),
        git_auth=git_auth if git_auth is not None else FakeGitAuth(),
        gha_output=gha_output if gha_output is not None else FakeGhaOutput(),
        env=env if env is not None else EnvSnapshot.empty(),
        github_token=github_token,
        cwd=cwd if cwd is not None else Path("/fake/repo"),
    )
