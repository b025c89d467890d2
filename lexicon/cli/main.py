"""
CLI entry point for lexicon.

Usage
─────
  # Page through a script (Enter = next page, < = back, 3 = three pages, q = quit)
  python -m lexicon --scripts Data/Scripts.rvdata2 browse Scene_Map

  # Print lines around a line number (0-based)
  python -m lexicon line Game_Actor 120 --surround 3

  # Search
  python -m lexicon named Window_
  python -m lexicon named "^Scene_(Map|Battle)$" --regex
  python -m lexicon defining RPG::BaseItem

  # Jump to a method definition and page from there
  python -m lexicon find "Game_Actor#level_up"

  # Script browser window
  python -m lexicon gui

Subcommands are implemented as standalone functions (cmd_browse, cmd_line,
cmd_named, cmd_defining, cmd_find) so they can be unit-tested without
invoking argparse.
"""

import argparse
import logging
import re
import sys
from typing import Optional

from lexicon.config import LexiconConfig
from lexicon.exceptions import LexiconBaseError
from lexicon.resolver.factory import RESOLVER_KINDS, get_resolver
from lexicon.session import LexiconSession
from lexicon.store.loader import load_scripts
from lexicon.store.repository import ScriptRepository

__all__ = [
    "build_parser",
    "build_session",
    "cmd_browse",
    "cmd_line",
    "cmd_named",
    "cmd_defining",
    "cmd_find",
    "main",
]

logger = logging.getLogger(__name__)

_DEFAULTS = LexiconConfig()


# ── Argument parser ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Subcommands: browse | line | named | defining | find | gui
    """
    parser = argparse.ArgumentParser(
        prog="lexicon",
        description="Browse and search RPG Maker VX Ace scripts",
    )
    parser.add_argument(
        "--scripts",
        default="Data/Scripts.rvdata2",
        metavar="PATH",
        help="Scripts.rvdata2 file or directory of .rb files "
             "(default: Data/Scripts.rvdata2)",
    )
    parser.add_argument(
        "--pager-lines",
        type=int,
        default=_DEFAULTS.pager_lines,
        dest="pager_lines",
        metavar="N",
        help=f"Lines per pager page (default: {_DEFAULTS.pager_lines})",
    )
    parser.add_argument(
        "--resolver",
        choices=list(RESOLVER_KINDS),
        default="text",
        help="Signature resolver used by `find` (default: text)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )

    sub = parser.add_subparsers(dest="subcommand")

    # ── browse ────────────────────────────────────────────────────────────
    brw = sub.add_parser("browse", help="Page through scripts matching NAME")
    brw.add_argument("name", metavar="NAME", help="Script name substring")

    # ── line ──────────────────────────────────────────────────────────────
    lin = sub.add_parser("line", help="Print lines around LINE of script NAME")
    lin.add_argument("name", metavar="NAME", help="Script name substring")
    lin.add_argument("line", type=int, metavar="LINE", help="0-based line number")
    lin.add_argument(
        "--surround",
        type=int,
        default=None,
        metavar="N",
        help=f"Lines above and below LINE (default: {_DEFAULTS.surrounding_lines})",
    )

    # ── named ─────────────────────────────────────────────────────────────
    nam = sub.add_parser("named", help="List non-empty scripts whose name matches")
    nam.add_argument("query", nargs="?", default="", metavar="QUERY",
                     help="Name substring (default: list all)")
    nam.add_argument(
        "--regex",
        action="store_true",
        default=False,
        help="Treat QUERY as a regular expression",
    )

    # ── defining ──────────────────────────────────────────────────────────
    dfn = sub.add_parser("defining", help="List scripts defining a class or module")
    dfn.add_argument("symbol", metavar="SYMBOL", help="Class or module name, e.g. RPG::Actor")

    # ── find ──────────────────────────────────────────────────────────────
    fnd = sub.add_parser("find", help="Page from the definition of Type#method / Type.method")
    fnd.add_argument("signature", metavar="SIGNATURE")

    # ── gui ───────────────────────────────────────────────────────────────
    sub.add_parser("gui", help="Open the script browser window")

    return parser


# ── Helpers ───────────────────────────────────────────────────────────────────


def build_session(
    scripts: str,
    pager_lines: int = _DEFAULTS.pager_lines,
    resolver: str = "text",
) -> LexiconSession:
    """Load the corpus at *scripts* and wrap it in a LexiconSession."""
    records = load_scripts(scripts)
    repository = ScriptRepository(records)
    return LexiconSession(
        repository,
        resolver=get_resolver(resolver, repository),
        config=LexiconConfig(pager_lines=pager_lines),
    )


def _print_names(names: list[str]) -> None:
    if not names:
        print("0 scripts found.")
        return
    for name in names:
        print(name)


# ── Command implementations ───────────────────────────────────────────────────


def cmd_browse(session: LexiconSession, name: str) -> int:
    """Page through scripts matching *name*; returns lines viewed."""
    viewed = session.browse(name)
    logger.debug("Viewed %d lines", viewed)
    return viewed


def cmd_line(
    session: LexiconSession,
    name: str,
    line: int,
    surround: Optional[int] = None,
) -> int:
    """Print the chunk around *line*; returns the number of lines printed."""
    return session.line(name, line, surround)


def cmd_named(session: LexiconSession, query: str, regex: bool = False) -> list[str]:
    """Print and return the names of non-empty scripts matching *query*."""
    if regex:
        try:
            pattern = re.compile(query)
        except re.error as exc:
            raise ValueError(f"Invalid regular expression {query!r}: {exc}") from exc
        names = session.named(pattern)
    else:
        names = session.named(query)
    _print_names(names)
    return names


def cmd_defining(session: LexiconSession, symbol: str) -> list[str]:
    """Print and return the names of scripts defining *symbol*."""
    names = session.defining(symbol)
    _print_names(names)
    return names


def cmd_find(session: LexiconSession, signature: str) -> int:
    """Page from the definition of *signature*; returns lines viewed."""
    return session.find(signature)


def _run_gui(session: LexiconSession) -> int:
    from PyQt6.QtWidgets import QApplication
    from lexicon.gui.main_window import MainWindow

    app = QApplication.instance() or QApplication(sys.argv)
    window = MainWindow(session)
    window.show()
    return app.exec()


# ── Entry point ───────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    level = logging.DEBUG if ns.debug else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    if ns.subcommand is None:
        parser.print_help()
        return 0

    try:
        session = build_session(ns.scripts, ns.pager_lines, ns.resolver)

        if ns.subcommand == "browse":
            cmd_browse(session, ns.name)
        elif ns.subcommand == "line":
            cmd_line(session, ns.name, ns.line, ns.surround)
        elif ns.subcommand == "named":
            cmd_named(session, ns.query, regex=ns.regex)
        elif ns.subcommand == "defining":
            cmd_defining(session, ns.symbol)
        elif ns.subcommand == "find":
            cmd_find(session, ns.signature)
        elif ns.subcommand == "gui":
            return _run_gui(session)
    except (LexiconBaseError, FileNotFoundError, ValueError) as exc:
        logger.debug("%s failed", ns.subcommand, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
