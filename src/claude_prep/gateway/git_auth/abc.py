"""Abstract base class for configuring git credentials in the runner checkout."""

from abc import ABC, abstractmethod
from pathlib import Path

from claude_prep.core.invocation import Repository


class GitAuth(ABC):
    """Abstract interface for git credential setup.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def configure(self, *, github_token: str, repository: Repository, cwd: Path) -> None:
        """Configure the checkout at cwd so the agent can commit and push.

        Args:
            github_token: Token used for authenticated pushes
            repository: Repository the origin remote points at
            cwd: Root of the git checkout

        Raises:
            RuntimeError: If a git command fails
        """
        ...
