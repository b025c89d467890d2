"""Data models for the store module."""

from dataclasses import dataclass, field
from typing import Optional

__all__ = ["ScriptRecord", "split_lines"]


def split_lines(code: str) -> list[str]:
    """Split *code* on any line boundary (`\\r\\n` or `\\n`); no trailing empty line."""
    return code.splitlines()


@dataclass
class ScriptRecord:
    """
    One named unit of source text from the script editor.

    Fields
    ──────
    name       — script title as shown in the editor (need not be unique)
    code       — decoded source text
    source_id  — host identifier for the script (editor id in Scripts.rvdata2);
                 None until the repository assigns the load position
    lines      — derived once from `code`; treat as read-only
    """
    name:      str
    code:      str
    source_id: Optional[int] = None
    lines:     list[str]     = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.lines = split_lines(self.code)

    @property
    def is_blank(self) -> bool:
        """True iff the code is empty or whitespace-only."""
        return not self.code.strip()

    def __str__(self) -> str:
        return (
            f"ScriptRecord(name={self.name!r}, lines={len(self.lines)}, "
            f"source_id={self.source_id})"
        )
