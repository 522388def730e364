"""Tests for branch resolution."""

import pytest

from claude_prep.core.branches import (
    BASE_BRANCH_RESOLVERS,
    CURRENT_BRANCH_RESOLVERS,
    DEFAULT_BRANCH,
    first_resolved,
    resolve_branches,
)
from claude_prep.core.env_snapshot import EnvSnapshot
from claude_prep.core.invocation import (
    BranchInfo,
    InvocationContext,
    InvocationInputs,
    Repository,
)


def _context(
    event_name: str = "workflow_dispatch",
    *,
    base_branch: str = "",
    entity_number: int | None = None,
) -> InvocationContext:
    return InvocationContext(
        event_name=event_name,
        actor="test-user",
        repository=Repository(owner="test-owner", repo="test-repo"),
        inputs=InvocationInputs(base_branch=base_branch),
        entity_number=entity_number,
    )


def _env(*, head_ref: str | None = None, ref_name: str | None = None) -> EnvSnapshot:
    return EnvSnapshot.from_environ(
        {
            key: value
            for key, value in {"GITHUB_HEAD_REF": head_ref, "GITHUB_REF_NAME": ref_name}.items()
            if value is not None
        }
    )


class TestResolveBranches:
    """Tests for resolve_branches()."""

    def test_no_signals_falls_back_to_main(self) -> None:
        """Without head ref or ref name both branches are main and no work branch exists."""
        info = resolve_branches(_context(), EnvSnapshot.empty())

        assert info == BranchInfo(base_branch="main", current_branch="main", claude_branch=None)

    def test_head_ref_wins_over_ref_name(self) -> None:
        """GITHUB_HEAD_REF takes priority over GITHUB_REF_NAME."""
        info = resolve_branches(_context(), _env(head_ref="feature", ref_name="123/merge"))

        assert info.current_branch == "feature"
        assert info.base_branch == "feature"

    def test_ref_name_used_when_head_ref_missing(self) -> None:
        """GITHUB_REF_NAME is the second choice."""
        info = resolve_branches(_context(), _env(ref_name="release"))

        assert info.current_branch == "release"
        assert info.base_branch == "release"

    def test_empty_head_ref_is_ignored(self) -> None:
        """An empty GITHUB_HEAD_REF (push events) counts as absent."""
        env = EnvSnapshot.from_environ({"GITHUB_HEAD_REF": "", "GITHUB_REF_NAME": "develop"})

        assert resolve_branches(_context(), env).current_branch == "develop"

    def test_base_branch_input_overrides_base_only(self) -> None:
        """An explicit base_branch input changes the base, not the current branch."""
        info = resolve_branches(_context(base_branch="develop"), _env(ref_name="feature"))

        assert info.base_branch == "develop"
        assert info.current_branch == "feature"

    @pytest.mark.parametrize(
        "event_name", ["workflow_dispatch", "push", "schedule", "repository_dispatch"]
    )
    def test_direct_invocation_has_no_work_branch(self, event_name: str) -> None:
        """Direct invocations never get a dedicated branch, even with an entity number."""
        info = resolve_branches(_context(event_name, entity_number=42), EnvSnapshot.empty())

        assert info.claude_branch is None

    def test_issue_comment_gets_issue_branch(self) -> None:
        """Comment-triggered issue events work on <prefix>issue-<number>."""
        info = resolve_branches(_context("issue_comment", entity_number=42), EnvSnapshot.empty())

        assert info.claude_branch == "claude/issue-42"

    def test_review_comment_gets_pr_branch(self) -> None:
        """Pull request review comments work on <prefix>pr-<number>."""
        info = resolve_branches(
            _context("pull_request_review_comment", entity_number=7), EnvSnapshot.empty()
        )

        assert info.claude_branch == "claude/pr-7"

    def test_interactive_event_without_number_has_no_work_branch(self) -> None:
        """Without an entity number there is nothing to name the branch after."""
        info = resolve_branches(_context("issue_comment"), EnvSnapshot.empty())

        assert info.claude_branch is None


class TestResolverOrder:
    """Tests for the ordered resolver lists."""

    def test_current_branch_order(self) -> None:
        """Current branch resolution order is head ref, ref name, default."""
        assert [name for name, _ in CURRENT_BRANCH_RESOLVERS] == ["head_ref", "ref_name", "default"]

    def test_base_branch_order(self) -> None:
        """Base branch resolution checks the explicit input first."""
        assert [name for name, _ in BASE_BRANCH_RESOLVERS] == [
            "input_base_branch",
            "head_ref",
            "ref_name",
            "default",
        ]

    def test_first_resolved_skips_empty_answers(self) -> None:
        """Resolvers returning None or an empty string are skipped."""
        resolvers = (
            ("none", lambda context, env: None),
            ("empty", lambda context, env: ""),
            ("value", lambda context, env: "picked"),
        )

        assert first_resolved(resolvers, _context(), EnvSnapshot.empty()) == "picked"

    def test_first_resolved_with_nothing_returns_default(self) -> None:
        """An exhausted resolver list still yields the default branch."""
        assert first_resolved((), _context(), EnvSnapshot.empty()) == DEFAULT_BRANCH
