"""Tests for actor authorization and bot-name canonicalization."""

import pytest

from claude_prep.core.actor import (
    UnauthorizedActorError,
    authorize_actor,
    canonical_actor_name,
    parse_allowed_bots,
)
from claude_prep.core.invocation import (
    ActorIdentity,
    InvocationContext,
    InvocationInputs,
    Repository,
)
from claude_prep.gateway.github_users.abc import IdentityLookupError
from claude_prep.gateway.github_users.fake import FakeGitHubUsers


def _context(actor: str, *, allowed_bots: str = "") -> InvocationContext:
    return InvocationContext(
        event_name="workflow_dispatch",
        actor=actor,
        repository=Repository(owner="test-owner", repo="test-repo"),
        inputs=InvocationInputs(allowed_bots=allowed_bots),
    )


class TestCanonicalActorName:
    """Tests for canonical_actor_name()."""

    @pytest.mark.parametrize(
        ("actor", "expected"),
        [
            ("claude[bot]", "claude"),
            ("dependabot[bot]", "dependabot"),
            ("Renovate[BOT]", "renovate"),
            ("octocat", "octocat"),
            ("  spaced[bot]  ", "spaced"),
        ],
    )
    def test_strips_bot_suffix(self, actor: str, expected: str) -> None:
        """Decorated and undecorated handles canonicalize to the short name."""
        assert canonical_actor_name(actor) == expected

    def test_only_trailing_suffix_is_removed(self) -> None:
        """A [bot] marker in the middle of a handle is left alone."""
        assert canonical_actor_name("odd[bot]name") == "odd[bot]name"


class TestParseAllowedBots:
    """Tests for parse_allowed_bots()."""

    def test_empty_string_is_empty_set(self) -> None:
        """An empty input allows no bots."""
        assert parse_allowed_bots("") == frozenset()

    def test_splits_on_commas_and_whitespace(self) -> None:
        """Commas, spaces and newlines all separate entries."""
        assert parse_allowed_bots("dependabot, renovate\nclaude") == frozenset(
            {"dependabot", "renovate", "claude"}
        )

    def test_entries_are_canonicalized(self) -> None:
        """Entries written with the [bot] suffix or in caps still match."""
        assert parse_allowed_bots("Dependabot[bot],,") == frozenset({"dependabot"})


class TestAuthorizeActor:
    """Tests for authorize_actor()."""

    def test_human_user_always_passes(self) -> None:
        """Human actors are authorized regardless of the allow-list."""
        users = FakeGitHubUsers.with_human("octocat")

        identity = authorize_actor(_context("octocat", allowed_bots="someone-else"), users)

        assert identity == ActorIdentity(login="octocat", id=12345, type="User")
        assert users.lookups == ["octocat"]

    def test_bot_without_allow_list_is_rejected(self) -> None:
        """A bot is rejected when allowed_bots is empty, naming canonical name and type."""
        users = FakeGitHubUsers.with_bot("claude[bot]")

        with pytest.raises(UnauthorizedActorError) as exc_info:
            authorize_actor(_context("claude[bot]"), users)

        assert "Workflow initiated by non-human actor: claude (type: Bot)" in str(exc_info.value)
        assert exc_info.value.actor_name == "claude"
        assert exc_info.value.actor_type == "Bot"

    def test_bot_in_allow_list_passes(self) -> None:
        """A bot whose canonical name is listed is authorized."""
        users = FakeGitHubUsers.with_bot("dependabot[bot]")

        identity = authorize_actor(_context("dependabot[bot]", allowed_bots="dependabot"), users)

        assert identity.type == "Bot"

    def test_bot_not_in_allow_list_is_rejected(self) -> None:
        """Listing other bots does not authorize this one."""
        users = FakeGitHubUsers.with_bot("renovate[bot]")

        with pytest.raises(UnauthorizedActorError, match="renovate \\(type: Bot\\)"):
            authorize_actor(_context("renovate[bot]", allowed_bots="dependabot,claude"), users)

    def test_wildcard_allows_any_bot(self) -> None:
        """The '*' allow-list entry authorizes every non-human actor."""
        users = FakeGitHubUsers.with_bot("renovate[bot]")

        identity = authorize_actor(_context("renovate[bot]", allowed_bots="*"), users)

        assert identity.login == "renovate[bot]"

    def test_organization_is_treated_as_non_human(self) -> None:
        """Organization accounts go through the allow-list check too."""
        users = FakeGitHubUsers(
            users={"acme": ActorIdentity(login="acme", id=7, type="Organization")}
        )

        with pytest.raises(UnauthorizedActorError, match="acme \\(type: Organization\\)"):
            authorize_actor(_context("acme"), users)

    def test_lookup_failure_propagates_unchanged(self) -> None:
        """API errors are not wrapped or retried."""
        users = FakeGitHubUsers(lookup_error="HTTP 502")

        with pytest.raises(IdentityLookupError, match="HTTP 502"):
            authorize_actor(_context("octocat"), users)

        assert users.lookups == ["octocat"]
