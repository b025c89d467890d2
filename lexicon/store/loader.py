"""
Script corpus loaders.

Two sources are supported:

  • Data/Scripts.rvdata2 — the editor's persisted store: a Marshal array of
    [id, name, zlib-deflated code] triples
  • a directory of exported `*.rb` files — one script per file, ordered by
    file name, named after the file stem
"""

import logging
import zlib
from pathlib import Path
from typing import Union

from lexicon.exceptions import LoaderError
from lexicon.store import marshal
from lexicon.store.models import ScriptRecord

__all__ = ["load_rvdata2", "load_directory", "load_scripts"]

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _text(value: object) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if value is None:
        return ""
    return str(value)


def load_rvdata2(path: PathLike) -> list[ScriptRecord]:
    """
    Read and inflate every script in a Scripts.rvdata2 file.

    Returns:
        Records in editor order; `source_id` is the editor's script id.

    Raises:
        FileNotFoundError: *path* does not exist.
        LoaderError: the file is not a Marshal array of script triples.
    """
    path = Path(path).expanduser()
    if not path.is_file():
        raise FileNotFoundError(f"Script data not found: {path}")

    logger.info("Loading scripts from %s", path)
    data = marshal.loads(path.read_bytes())
    if not isinstance(data, list):
        raise LoaderError(f"{path.name}: expected an array of scripts, got {type(data).__name__}")

    records: list[ScriptRecord] = []
    for position, entry in enumerate(data):
        if not isinstance(entry, list) or len(entry) < 3:
            raise LoaderError(f"{path.name}: entry {position} is not an [id, name, code] triple")
        script_id, name, packed = entry[0], entry[1], entry[-1]
        if not isinstance(packed, bytes):
            raise LoaderError(f"{path.name}: entry {position} has no code string")
        try:
            code = zlib.decompress(packed)
        except zlib.error as exc:
            raise LoaderError(f"{path.name}: cannot inflate entry {position}: {exc}") from exc
        records.append(ScriptRecord(
            name=_text(name),
            code=code.decode("utf-8", errors="replace"),
            source_id=script_id if isinstance(script_id, int) else position,
        ))

    logger.info("Loaded %d scripts", len(records))
    return records


def load_directory(path: PathLike, pattern: str = "*.rb") -> list[ScriptRecord]:
    """
    Read one script per file matching *pattern* in *path*, sorted by file name.

    Raises:
        FileNotFoundError: *path* is not a directory.
    """
    root = Path(path).expanduser()
    if not root.is_dir():
        raise FileNotFoundError(f"Script directory not found: {root}")

    files = sorted(p for p in root.glob(pattern) if p.is_file())
    records = [
        ScriptRecord(
            name=f.stem,
            code=f.read_text(encoding="utf-8", errors="replace"),
            source_id=position,
        )
        for position, f in enumerate(files)
    ]
    logger.info("Loaded %d scripts from %s", len(records), root)
    return records


def load_scripts(path: PathLike) -> list[ScriptRecord]:
    """Dispatch to load_directory for a directory, load_rvdata2 otherwise."""
    if Path(path).expanduser().is_dir():
        return load_directory(path)
    return load_rvdata2(path)
