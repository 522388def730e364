"""Fake git credential setup for testing."""

from dataclasses import dataclass
from pathlib import Path

from claude_prep.core.invocation import Repository
from claude_prep.gateway.git_auth.abc import GitAuth


@dataclass(frozen=True)
class ConfigureCall:
    github_token: str
    repository: Repository
    cwd: Path


class FakeGitAuth(GitAuth):
    """Records configure() calls instead of touching git."""

    def __init__(self, *, configure_error: str | None = None) -> None:
        self._configure_error = configure_error
        self._configure_calls: list[ConfigureCall] = []

    def configure(self, *, github_token: str, repository: Repository, cwd: Path) -> None:
        self._configure_calls.append(
            ConfigureCall(github_token=github_token, repository=repository, cwd=cwd)
        )
        if self._configure_error is not None:
            raise RuntimeError(self._configure_error)

    @property
    def configure_calls(self) -> list[ConfigureCall]:
        return list(self._configure_calls)
