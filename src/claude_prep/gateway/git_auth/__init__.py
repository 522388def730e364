"""Git credential configuration for agent runs.

Import from submodules:
- abc: GitAuth
- real: RealGitAuth
- fake: FakeGitAuth
"""
