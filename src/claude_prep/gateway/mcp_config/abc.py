"""Abstract base class for building the agent's MCP server configuration."""

from abc import ABC, abstractmethod


class McpConfigBuilder(ABC):
    @abstractmethod
    def build(self, *, allowed_tools: list[str], github_token: str) -> str:
        """Serialize the MCP server configuration for the enabled tools.

        Args:
            allowed_tools: Tools enabled for this invocation, in declaration order
            github_token: Token handed to servers that talk to GitHub

        Returns:
            Serialized configuration; never None, an empty configuration when
            no server is needed
        """
        ...
