"""GitHub user lookups used for actor authorization.

Import from submodules:
- abc: GitHubUsers, IdentityLookupError
- real: RealGitHubUsers
- fake: FakeGitHubUsers
"""
