"""Fake GitHub user lookups for testing."""

from claude_prep.core.invocation import ActorIdentity
from claude_prep.gateway.github_users.abc import GitHubUsers, IdentityLookupError


class FakeGitHubUsers(GitHubUsers):
    """In-memory fake implementation of GitHub user lookups.

    This class has NO public setup methods. All state is provided via constructor.
    Logins without a configured identity raise IdentityLookupError, like a 404.
    """

    def __init__(
        self,
        *,
        users: dict[str, ActorIdentity] | None = None,
        lookup_error: str | None = None,
    ) -> None:
        """Create FakeGitHubUsers with pre-configured state.

        Args:
            users: Mapping of login to the identity returned for it
            lookup_error: When set, every lookup raises IdentityLookupError with this message
        """
        self._users = users if users is not None else {}
        self._lookup_error = lookup_error
        self._lookups: list[str] = []

    @classmethod
    def with_human(cls, login: str) -> "FakeGitHubUsers":
        """Create a fake that resolves a single human user."""
        return cls(users={login: ActorIdentity(login=login, id=12345, type="User")})

    @classmethod
    def with_bot(cls, login: str) -> "FakeGitHubUsers":
        """Create a fake that resolves a single bot account."""
        return cls(users={login: ActorIdentity(login=login, id=12345, type="Bot")})

    def get_user(self, login: str) -> ActorIdentity:
        self._lookups.append(login)
        if self._lookup_error is not None:
            raise IdentityLookupError(self._lookup_error)
        if login not in self._users:
            raise IdentityLookupError(f"GitHub user not found: {login}")
        return self._users[login]

    @property
    def lookups(self) -> list[str]:
        """Logins passed to get_user(), in call order."""
        return list(self._lookups)
