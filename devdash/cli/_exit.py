from __future__ import annotations

# Process exit codes shared by all subcommands
OK = 0
INVALID = 1  # validation errors (or warnings under --strict)
USER_ERR = 2  # bad usage, unreadable or unparseable input

__all__ = ["OK", "INVALID", "USER_ERR"]
