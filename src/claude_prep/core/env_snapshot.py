"""Immutable snapshot of the environment variables the preparation step reads.

The process environment is read once at the CLI boundary; everything below
that point receives an EnvSnapshot instead of touching os.environ.
"""

from collections.abc import Mapping
from dataclasses import dataclass

HEAD_REF_VAR = "GITHUB_HEAD_REF"
REF_NAME_VAR = "GITHUB_REF_NAME"
CLAUDE_ARGS_VAR = "CLAUDE_ARGS"
RUNNER_TEMP_VAR = "RUNNER_TEMP"
GITHUB_OUTPUT_VAR = "GITHUB_OUTPUT"
GITHUB_ENV_VAR = "GITHUB_ENV"


def _non_empty(environ: Mapping[str, str], name: str) -> str | None:
    value = environ.get(name)
    if value is None or value == "":
        return None
    return value


@dataclass(frozen=True)
class EnvSnapshot:
    """Environment signals consumed by branch resolution and argument assembly.

    Attributes:
        head_ref: GITHUB_HEAD_REF, set for pull_request events
        ref_name: GITHUB_REF_NAME, the short name of the triggering ref
        claude_args: CLAUDE_ARGS, free-form extra flags for the agent process
        runner_temp: RUNNER_TEMP, root for the prompt directory
        github_output: GITHUB_OUTPUT, path of the step output file
        github_env: GITHUB_ENV, path of the exported-variables file

    Empty strings are normalized to None so "unset" and "set but empty" behave
    the same way.
    """

    head_ref: str | None
    ref_name: str | None
    claude_args: str | None
    runner_temp: str | None
    github_output: str | None
    github_env: str | None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "EnvSnapshot":
        return cls(
            head_ref=_non_empty(environ, HEAD_REF_VAR),
            ref_name=_non_empty(environ, REF_NAME_VAR),
            claude_args=_non_empty(environ, CLAUDE_ARGS_VAR),
            runner_temp=_non_empty(environ, RUNNER_TEMP_VAR),
            github_output=_non_empty(environ, GITHUB_OUTPUT_VAR),
            github_env=_non_empty(environ, GITHUB_ENV_VAR),
        )

    @classmethod
    def empty(cls) -> "EnvSnapshot":
        """Snapshot with every signal absent (e.g., a local manual run)."""
        return cls(
            head_ref=None,
            ref_name=None,
            claude_args=None,
            runner_temp=None,
            github_output=None,
            github_env=None,
        )
