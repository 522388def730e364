"""Production MCP configuration builder.

Tools follow the `mcp__<server>__<tool>` naming convention; each server named
by an enabled tool is looked up in KNOWN_SERVERS and emitted into a
`{"mcpServers": {...}}` JSON document.
"""

import json
import logging
from typing import Any

from claude_prep.gateway.mcp_config.abc import McpConfigBuilder

logger = logging.getLogger(__name__)

MCP_TOOL_PREFIX = "mcp__"

GITHUB_MCP_IMAGE = "ghcr.io/github/github-mcp-server"


def _github_server(github_token: str) -> dict[str, Any]:
    return {
        "command": "docker",
        "args": ["run", "-i", "--rm", "-e", "GITHUB_PERSONAL_ACCESS_TOKEN", GITHUB_MCP_IMAGE],
        "env": {"GITHUB_PERSONAL_ACCESS_TOKEN": github_token},
    }


KNOWN_SERVERS = {
    "github": _github_server,
}


def server_name_for_tool(tool: str) -> str | None:
    """Return the MCP server a tool belongs to, or None for built-in tools.

    Examples:
        >>> server_name_for_tool("mcp__github__create_issue")
        'github'
        >>> server_name_for_tool("Bash(git status)") is None
        True
    """
    if not tool.startswith(MCP_TOOL_PREFIX):
        return None
    server, sep, _ = tool[len(MCP_TOOL_PREFIX) :].partition("__")
    if not sep or not server:
        return None
    return server


class RealMcpConfigBuilder(McpConfigBuilder):
    def build(self, *, allowed_tools: list[str], github_token: str) -> str:
        servers: dict[str, dict[str, Any]] = {}
        for tool in allowed_tools:
            server = server_name_for_tool(tool)
            if server is None or server in servers:
                continue
            factory = KNOWN_SERVERS.get(server)
            if factory is None:
                logger.debug("No built-in MCP server named %s, skipping tool %s", server, tool)
                continue
            servers[server] = factory(github_token)
        logger.debug("MCP config servers: %s", sorted(servers))
        return json.dumps({"mcpServers": servers})
