"""Prompt files read by the agent process.

The prompt directory holds two files:
- claude-prompt.txt: system context, always written
- claude-user-request.txt: the raw user prompt, only when one was given
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from claude_prep.core.env_snapshot import EnvSnapshot
from claude_prep.core.invocation import InvocationContext

logger = logging.getLogger(__name__)

PROMPT_DIR_NAME = "claude-prompts"
DEFAULT_TEMP_ROOT = "/tmp"
SYSTEM_PROMPT_FILENAME = "claude-prompt.txt"
USER_REQUEST_FILENAME = "claude-user-request.txt"


@dataclass(frozen=True)
class PromptFiles:
    """Paths written by write_prompts(); user_request is None when no prompt was given."""

    system_prompt: Path
    user_request: Path | None


def prompt_dir_for(env: EnvSnapshot) -> Path:
    """Conventional prompt directory: <RUNNER_TEMP or /tmp>/claude-prompts."""
    root = env.runner_temp if env.runner_temp is not None else DEFAULT_TEMP_ROOT
    return Path(root) / PROMPT_DIR_NAME


def ensure_prompt_dir(prompt_dir: Path) -> Path:
    prompt_dir.mkdir(parents=True, exist_ok=True)
    return prompt_dir


def system_prompt_text(context: InvocationContext) -> str:
    return f"Repository: {context.repository.full_name}"


def write_prompts(context: InvocationContext, prompt_dir: Path) -> PromptFiles:
    """Write the prompt files for this invocation into prompt_dir.

    Both files are overwritten on every call. When the prompt input is empty,
    no user request file is written and a leftover one from an earlier call
    is removed.

    Raises:
        OSError: If a file cannot be written (propagated unchanged)
    """
    system_prompt = prompt_dir / SYSTEM_PROMPT_FILENAME
    system_prompt.write_text(system_prompt_text(context), encoding="utf-8")
    logger.debug("Wrote %s", system_prompt)

    user_request = prompt_dir / USER_REQUEST_FILENAME
    if not context.inputs.prompt:
        user_request.unlink(missing_ok=True)
        return PromptFiles(system_prompt=system_prompt, user_request=None)

    user_request.write_text(context.inputs.prompt, encoding="utf-8")
    logger.debug("Wrote %s", user_request)
    return PromptFiles(system_prompt=system_prompt, user_request=user_request)
