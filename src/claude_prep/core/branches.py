"""Branch resolution for the agent run.

Each branch is resolved by walking an ordered list of named resolvers and
taking the first non-empty answer. The lists are module constants so the
fallback order can be inspected and tested on its own.
"""

import logging
from collections.abc import Callable, Sequence

from claude_prep.core.env_snapshot import EnvSnapshot
from claude_prep.core.invocation import BranchInfo, InvocationContext

logger = logging.getLogger(__name__)

DEFAULT_BRANCH = "main"

BranchResolver = Callable[[InvocationContext, EnvSnapshot], str | None]

# Events where someone talks to the agent on an issue or PR thread
PR_INTERACTIVE_EVENTS = frozenset({"pull_request_review_comment", "pull_request_review"})
ISSUE_INTERACTIVE_EVENTS = frozenset({"issue_comment", "issues"})


def _input_base_branch(context: InvocationContext, env: EnvSnapshot) -> str | None:
    return context.inputs.base_branch.strip() or None


def _head_ref(context: InvocationContext, env: EnvSnapshot) -> str | None:
    return env.head_ref


def _ref_name(context: InvocationContext, env: EnvSnapshot) -> str | None:
    return env.ref_name


def _default_branch(context: InvocationContext, env: EnvSnapshot) -> str | None:
    return DEFAULT_BRANCH


CURRENT_BRANCH_RESOLVERS: tuple[tuple[str, BranchResolver], ...] = (
    ("head_ref", _head_ref),
    ("ref_name", _ref_name),
    ("default", _default_branch),
)

BASE_BRANCH_RESOLVERS: tuple[tuple[str, BranchResolver], ...] = (
    ("input_base_branch", _input_base_branch),
    *CURRENT_BRANCH_RESOLVERS,
)


def first_resolved(
    resolvers: Sequence[tuple[str, BranchResolver]],
    context: InvocationContext,
    env: EnvSnapshot,
) -> str:
    """Return the first non-empty value produced by the resolvers, in order.

    Falls back to DEFAULT_BRANCH if every resolver comes up empty.
    """
    for name, resolver in resolvers:
        value = resolver(context, env)
        if value:
            logger.debug("Branch resolved by %s: %s", name, value)
            return value
    return DEFAULT_BRANCH


def dedicated_branch_name(context: InvocationContext) -> str | None:
    """Name of the branch the agent may push to, or None for direct invocations."""
    if context.entity_number is None:
        return None
    if context.event_name in PR_INTERACTIVE_EVENTS:
        kind = "pr"
    elif context.event_name in ISSUE_INTERACTIVE_EVENTS:
        kind = "issue"
    else:
        return None
    return f"{context.inputs.branch_prefix}{kind}-{context.entity_number}"


def resolve_branches(context: InvocationContext, env: EnvSnapshot) -> BranchInfo:
    return BranchInfo(
        base_branch=first_resolved(BASE_BRANCH_RESOLVERS, context, env),
        current_branch=first_resolved(CURRENT_BRANCH_RESOLVERS, context, env),
        claude_branch=dedicated_branch_name(context),
    )
