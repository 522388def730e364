"""Production implementation writing to the GITHUB_OUTPUT and GITHUB_ENV files."""

import uuid
from pathlib import Path

from claude_prep.gateway.gha_output.abc import GhaOutput


def format_command_file_entry(key: str, value: str, *, delimiter: str) -> str:
    """Format one entry for a GitHub Actions command file.

    Single-line values use `key=value`. Values containing newlines use the
    heredoc form `key<<DELIMITER`, which is what the runner requires for
    multi-line content.
    """
    if "\n" not in value and "\r" not in value:
        return f"{key}={value}\n"
    if delimiter in key or delimiter in value:
        msg = f"Value for {key} contains the command file delimiter"
        raise ValueError(msg)
    return f"{key}<<{delimiter}\n{value}\n{delimiter}\n"


class RealGhaOutput(GhaOutput):
    """Appends entries to the runner's command files."""

    def __init__(self, *, github_output_path: str | None, github_env_path: str | None) -> None:
        self._github_output_path = github_output_path
        self._github_env_path = github_env_path

    def set_output(self, key: str, value: str) -> None:
        self._append(self._github_output_path, "GITHUB_OUTPUT", key, value)

    def export_variable(self, key: str, value: str) -> None:
        self._append(self._github_env_path, "GITHUB_ENV", key, value)

    def _append(self, path: str | None, variable: str, key: str, value: str) -> None:
        if path is None:
            msg = f"{variable} environment variable not set"
            raise RuntimeError(msg)
        entry = format_command_file_entry(key, value, delimiter=f"ghadelimiter_{uuid.uuid4()}")
        with open(Path(path), "a", encoding="utf-8") as f:
            f.write(entry)
