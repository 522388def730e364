"""Types describing one agent invocation and its prepared launch parameters."""

from dataclasses import dataclass, field
from typing import Any, Literal

ActorType = Literal["User", "Bot", "Organization"]

DEFAULT_BRANCH_PREFIX = "claude/"


@dataclass(frozen=True)
class Repository:
    """GitHub repository identity."""

    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def parse(cls, full_name: str) -> "Repository":
        """Parse an "owner/repo" string.

        Raises:
            ValueError: If the string is not in owner/repo form
        """
        owner, sep, repo = full_name.strip().partition("/")
        if not sep or not owner or not repo or "/" in repo:
            msg = f"Expected repository in owner/repo format, got: {full_name!r}"
            raise ValueError(msg)
        return cls(owner=owner, repo=repo)


@dataclass(frozen=True)
class InvocationInputs:
    """User-supplied action inputs.

    Attributes:
        prompt: Raw user request; empty when the run has no explicit prompt
        allowed_bots: Comma separated bot names allowed to trigger the run ("*" for all)
        allowed_tools: Comma or newline separated tool names enabled for the agent
        base_branch: Explicit base branch override; empty to resolve from the ref
        branch_prefix: Prefix for dedicated agent work branches
        use_commit_signing: Skip git credential setup (commits go through the API)
    """

    prompt: str = ""
    allowed_bots: str = ""
    allowed_tools: str = ""
    base_branch: str = ""
    branch_prefix: str = DEFAULT_BRANCH_PREFIX
    use_commit_signing: bool = False


@dataclass(frozen=True)
class InvocationContext:
    """Parsed triggering event, immutable for the duration of preparation."""

    event_name: str
    actor: str
    repository: Repository
    inputs: InvocationInputs = field(default_factory=InvocationInputs)
    comment_id: int | None = None
    entity_number: int | None = None


@dataclass(frozen=True)
class ActorIdentity:
    """Identity of a GitHub account as reported by the users API."""

    login: str
    id: int
    type: ActorType | str


@dataclass(frozen=True)
class BranchInfo:
    """Branches the agent reads from and may push to."""

    base_branch: str
    current_branch: str
    claude_branch: str | None


@dataclass(frozen=True)
class PreparedInvocation:
    """Everything the launch step needs to start the agent process."""

    comment_id: int | None
    branch_info: BranchInfo
    mcp_config: str
    claude_args: str

    def to_json_dict(self) -> dict[str, Any]:
        return {
            "comment_id": self.comment_id,
            "branch_info": {
                "base_branch": self.branch_info.base_branch,
                "current_branch": self.branch_info.current_branch,
                "claude_branch": self.branch_info.claude_branch,
            },
            "mcp_config": self.mcp_config,
            "claude_args": self.claude_args,
        }
