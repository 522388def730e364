"""Assembly of the flag string passed to the agent process.

User-supplied flags (CLAUDE_ARGS) come first and verbatim. Flags built here
are appended after them.
"""

import logging
import re
import shlex
from dataclasses import dataclass

from claude_prep.core.env_snapshot import EnvSnapshot
from claude_prep.core.invocation import InvocationInputs
from claude_prep.gateway.mcp_config.abc import McpConfigBuilder

logger = logging.getLogger(__name__)

MCP_CONFIG_FLAG = "--mcp-config"
ALLOWED_TOOLS_FLAGS = ("--allowedTools", "--allowed-tools")

_TOOL_SEPARATOR = re.compile(r"[,\n]")


@dataclass(frozen=True)
class AssembledArgs:
    claude_args: str
    mcp_config: str


def split_tool_list(raw: str) -> list[str]:
    """Split a comma or newline separated tool list, dropping blanks."""
    return [tool.strip() for tool in _TOOL_SEPARATOR.split(raw) if tool.strip()]


def tools_from_claude_args(claude_args: str) -> list[str]:
    """Collect tools named by --allowedTools flags inside a free-form arg string.

    Handles both `--allowedTools X` and `--allowedTools=X`. Strings that do
    not tokenize (e.g., an unbalanced quote) yield no tools; the string is
    still passed to the agent untouched.
    """
    try:
        tokens = shlex.split(claude_args)
    except ValueError:
        logger.debug("CLAUDE_ARGS does not tokenize, not scanning it for tools")
        return []

    tools: list[str] = []
    for index, token in enumerate(tokens):
        flag, sep, inline_value = token.partition("=")
        if flag not in ALLOWED_TOOLS_FLAGS:
            continue
        if sep:
            tools.extend(split_tool_list(inline_value))
        elif index + 1 < len(tokens):
            tools.extend(split_tool_list(tokens[index + 1]))
    return tools


def enabled_tools(inputs: InvocationInputs, env: EnvSnapshot) -> list[str]:
    """Tools enabled by the allowed_tools input and by CLAUDE_ARGS, de-duplicated."""
    from_args = tools_from_claude_args(env.claude_args) if env.claude_args else []
    return list(dict.fromkeys([*split_tool_list(inputs.allowed_tools), *from_args]))


def assemble_args(
    *,
    inputs: InvocationInputs,
    env: EnvSnapshot,
    mcp_config_builder: McpConfigBuilder,
    github_token: str,
) -> AssembledArgs:
    """Build the final argument string and the MCP config that goes with it.

    The MCP config is always built, so the caller always has a string to
    export. The --mcp-config flag is appended only when at least one tool is
    enabled.
    """
    tools = enabled_tools(inputs, env)
    mcp_config = mcp_config_builder.build(allowed_tools=tools, github_token=github_token)

    parts: list[str] = []
    if env.claude_args:
        parts.append(env.claude_args)
    if tools:
        parts.append(f"{MCP_CONFIG_FLAG} {shlex.quote(mcp_config)}")
    else:
        logger.debug("No tools enabled, omitting %s", MCP_CONFIG_FLAG)

    return AssembledArgs(claude_args=" ".join(parts), mcp_config=mcp_config)
