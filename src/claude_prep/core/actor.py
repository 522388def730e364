"""Authorization of the account that triggered the workflow run.

Human users always pass. Bots and organizations pass only when their
canonical name appears in the `allowed_bots` input, or when that input is
the wildcard "*".
"""

import logging
import re

from claude_prep.core.invocation import ActorIdentity, InvocationContext
from claude_prep.gateway.github_users.abc import GitHubUsers

logger = logging.getLogger(__name__)

HUMAN_ACTOR_TYPE = "User"
ALLOW_ALL_BOTS = "*"

_BOT_SUFFIX = re.compile(r"\[bot\]$", re.IGNORECASE)
_LIST_SEPARATOR = re.compile(r"[,\s]+")


class UnauthorizedActorError(Exception):
    """Error raised when a non-human actor is not in the allow-list."""

    def __init__(self, actor_name: str, actor_type: str) -> None:
        self.actor_name = actor_name
        self.actor_type = actor_type
        super().__init__(
            f"Workflow initiated by non-human actor: {actor_name} (type: {actor_type}). "
            f"Add the bot to the allowed_bots input or use '{ALLOW_ALL_BOTS}' to allow all bots."
        )


def canonical_actor_name(actor: str) -> str:
    """Strip the automation suffix from an actor handle.

    Examples:
        >>> canonical_actor_name("dependabot[bot]")
        'dependabot'
        >>> canonical_actor_name("Renovate")
        'renovate'
    """
    return _BOT_SUFFIX.sub("", actor.strip()).lower()


def parse_allowed_bots(allowed_bots: str) -> frozenset[str]:
    """Parse the comma/whitespace separated allow-list into canonical names."""
    names = (canonical_actor_name(entry) for entry in _LIST_SEPARATOR.split(allowed_bots))
    return frozenset(name for name in names if name)


def authorize_actor(context: InvocationContext, github_users: GitHubUsers) -> ActorIdentity:
    """Resolve the triggering actor and check it may run the agent.

    Args:
        context: Invocation whose actor and allowed_bots input are checked
        github_users: Gateway used for the single identity lookup

    Returns:
        The resolved identity

    Raises:
        UnauthorizedActorError: If the actor is not human and not allow-listed
        IdentityLookupError: If the lookup itself fails (propagated unchanged)
    """
    identity = github_users.get_user(context.actor)
    if identity.type == HUMAN_ACTOR_TYPE:
        logger.debug("Actor %s is a human user", context.actor)
        return identity

    name = canonical_actor_name(context.actor)
    allowed = parse_allowed_bots(context.inputs.allowed_bots)
    if ALLOW_ALL_BOTS in allowed or name in allowed:
        logger.debug("Non-human actor %s (type: %s) is allow-listed", name, identity.type)
        return identity

    raise UnauthorizedActorError(name, identity.type)
