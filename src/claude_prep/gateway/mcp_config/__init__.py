"""MCP configuration builder for the agent process.

Import from submodules:
- abc: McpConfigBuilder
- real: RealMcpConfigBuilder
- fake: FakeMcpConfigBuilder
"""
