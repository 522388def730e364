"""Production implementation of GitHub user lookups using the gh CLI."""

import json

from claude_prep.core.invocation import ActorIdentity
from claude_prep.gateway.github_users.abc import GitHubUsers, IdentityLookupError
from claude_prep.subprocess_utils import env_with_github_token, run_subprocess_with_context

USER_LOOKUP_TIMEOUT_SECONDS = 30


class RealGitHubUsers(GitHubUsers):
    """Looks up users with `gh api`, authenticated by the workflow token."""

    def __init__(self, *, github_token: str) -> None:
        self._github_token = github_token

    def get_user(self, login: str) -> ActorIdentity:
        try:
            result = run_subprocess_with_context(
                cmd=["gh", "api", f"users/{login}"],
                operation_context=f"look up GitHub user '{login}'",
                env=env_with_github_token(self._github_token),
                timeout=USER_LOOKUP_TIMEOUT_SECONDS,
            )
        except RuntimeError as e:
            raise IdentityLookupError(str(e)) from e

        try:
            data = json.loads(result.stdout)
            return ActorIdentity(login=data["login"], id=int(data["id"]), type=data["type"])
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            msg = f"Unexpected response when looking up GitHub user '{login}': {e}"
            raise IdentityLookupError(msg) from e
