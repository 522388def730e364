"""Subprocess helpers shared by the real gateway implementations."""

import logging
import os
import subprocess
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


def run_subprocess_with_context(
    *,
    cmd: list[str],
    operation_context: str,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    check: bool = True,
    capture_output: bool = True,
    timeout: float | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command and attach a readable description to any failure.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human readable description used in error messages
            (e.g., "look up GitHub user 'octocat'")
        cwd: Working directory for the command
        env: Full environment for the child process (inherits when None)
        check: Raise RuntimeError when the command exits non-zero
        capture_output: Capture stdout/stderr as text
        timeout: Optional timeout in seconds

    Returns:
        The completed process

    Raises:
        RuntimeError: If the binary is missing, the command times out, or it fails
            and check is True
    """
    logger.debug("Running %s (%s)", cmd[0], operation_context)
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            env=dict(env) if env is not None else None,
            check=False,
            capture_output=capture_output,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        msg = f"Failed to {operation_context}: command not found: {cmd[0]}"
        raise RuntimeError(msg) from e
    except subprocess.TimeoutExpired as e:
        msg = f"Failed to {operation_context}: timed out after {timeout} seconds"
        raise RuntimeError(msg) from e

    if check and result.returncode != 0:
        stderr = (result.stderr or "").strip()
        msg = f"Failed to {operation_context} (exit code {result.returncode})"
        if stderr:
            msg = f"{msg}: {stderr}"
        raise RuntimeError(msg)
    return result


def env_with_github_token(github_token: str) -> dict[str, str]:
    """Copy the current environment with GH_TOKEN set for gh CLI calls."""
    env = os.environ.copy()
    env["GH_TOKEN"] = github_token
    return env
