"""Abstract base class for GitHub user lookups."""

from abc import ABC, abstractmethod

from claude_prep.core.invocation import ActorIdentity


class IdentityLookupError(RuntimeError):
    """Error raised when the users API cannot resolve an account."""


class GitHubUsers(ABC):
    """Abstract interface for resolving GitHub accounts by login.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def get_user(self, login: str) -> ActorIdentity:
        """Look up an account by its login.

        Uses GET /users/{login}.

        Args:
            login: Account login exactly as recorded on the event (e.g., "dependabot[bot]")

        Returns:
            ActorIdentity with login, numeric id and account type

        Raises:
            IdentityLookupError: If the lookup fails for any reason
        """
        ...
