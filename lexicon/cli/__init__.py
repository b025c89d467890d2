"""
cli — command-line interface for lexicon.

Entry points
────────────
  python -m lexicon   (via lexicon/__main__.py)
  lexicon             (via pyproject.toml [project.scripts])

Subcommands: browse | line | named | defining | find | gui
"""

from lexicon.cli.main import build_parser, cmd_defining, cmd_find, cmd_line, cmd_named, main

__all__ = ["build_parser", "cmd_defining", "cmd_find", "cmd_line", "cmd_named", "main"]
