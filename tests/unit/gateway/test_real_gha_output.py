"""Tests for RealGhaOutput and the command file entry format."""

from pathlib import Path

import pytest

from claude_prep.gateway.gha_output.real import RealGhaOutput, format_command_file_entry


def test_single_line_entry() -> None:
    """Single-line values use key=value."""
    assert format_command_file_entry("k", "v", delimiter="EOF_X") == "k=v\n"


def test_multi_line_entry_uses_heredoc() -> None:
    """Multi-line values use the key<<DELIMITER form."""
    entry = format_command_file_entry("prompt", "a\nb", delimiter="EOF_X")

    assert entry == "prompt<<EOF_X\na\nb\nEOF_X\n"


def test_delimiter_collision_is_rejected() -> None:
    """A value containing the delimiter would truncate the entry, so it is refused."""
    with pytest.raises(ValueError, match="delimiter"):
        format_command_file_entry("k", "x\nEOF_X\ny", delimiter="EOF_X")


def test_set_output_appends_to_output_file(tmp_path: Path) -> None:
    """Outputs are appended to GITHUB_OUTPUT, env vars to GITHUB_ENV."""
    output_file = tmp_path / "output"
    env_file = tmp_path / "env"
    output_file.write_text("existing=1\n", encoding="utf-8")
    gha = RealGhaOutput(github_output_path=str(output_file), github_env_path=str(env_file))

    gha.set_output("claude_args", "--max-turns 3")
    gha.export_variable("CLAUDE_PROMPT_DIR", "/tmp/claude-prompts")

    assert output_file.read_text(encoding="utf-8") == "existing=1\nclaude_args=--max-turns 3\n"
    assert env_file.read_text(encoding="utf-8") == "CLAUDE_PROMPT_DIR=/tmp/claude-prompts\n"


def test_multi_line_output_round_trip(tmp_path: Path) -> None:
    """Multi-line outputs are written between matching delimiters."""
    output_file = tmp_path / "output"
    gha = RealGhaOutput(github_output_path=str(output_file), github_env_path=None)

    gha.set_output("mcp_config", "{\n}")

    lines = output_file.read_text(encoding="utf-8").splitlines()
    delimiter = lines[0].removeprefix("mcp_config<<")
    assert delimiter.startswith("ghadelimiter_")
    assert lines[1:] == ["{", "}", delimiter]


def test_unset_output_file_raises() -> None:
    """Publishing without GITHUB_OUTPUT configured is an error."""
    gha = RealGhaOutput(github_output_path=None, github_env_path=None)

    with pytest.raises(RuntimeError, match="GITHUB_OUTPUT environment variable not set"):
        gha.set_output("k", "v")

    with pytest.raises(RuntimeError, match="GITHUB_ENV environment variable not set"):
        gha.export_variable("K", "v")
