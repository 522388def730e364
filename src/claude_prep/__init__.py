"""claude-prep: prepare Claude agent runs inside GitHub Actions jobs.

See `claude-prep --help` for details.
"""
