"""Fake MCP configuration builder for testing."""

from dataclasses import dataclass

from claude_prep.gateway.mcp_config.abc import McpConfigBuilder


@dataclass(frozen=True)
class BuildCall:
    allowed_tools: list[str]
    github_token: str


class FakeMcpConfigBuilder(McpConfigBuilder):
    """Returns a fixed config string and records every build() call."""

    def __init__(self, *, config: str = '{"mcpServers": {}}') -> None:
        self._config = config
        self._build_calls: list[BuildCall] = []

    def build(self, *, allowed_tools: list[str], github_token: str) -> str:
        self._build_calls.append(
            BuildCall(allowed_tools=list(allowed_tools), github_token=github_token)
        )
        return self._config

    @property
    def build_calls(self) -> list[BuildCall]:
        return list(self._build_calls)
