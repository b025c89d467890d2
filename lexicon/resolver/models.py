"""
Data models for the resolver module.

Key concepts
────────────
Signature       — parsed `Type#method` (instance) or `Type.method` (type-level)
SourceLocation  — where the host says a member is defined
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from lexicon.exceptions import UnresolvedSignatureError

__all__ = ["Signature", "SourceLocation", "parse_signature"]

_SIGNATURE_RE = re.compile(
    r"^(?P<owner>[A-Za-z_]\w*(?:::[A-Za-z_]\w*)*)"   # Type, optionally namespaced
    r"(?P<sep>[#.])"                                 # '#' instance, '.' type-level
    r"(?P<member>[^\s#.]+)$"                         # method name (may end in ?, !, =)
)


@dataclass(frozen=True)
class Signature:
    """A reference to one method of one class or module."""
    owner:    str    # e.g. "Scene_Map" or "SES::Lexicon"
    member:   str    # e.g. "update"
    instance: bool   # True for Type#method, False for Type.method

    @property
    def owner_name(self) -> str:
        """Final segment of a namespaced owner ("SES::Lexicon" → "Lexicon")."""
        return self.owner.split("::")[-1]

    def __str__(self) -> str:
        return f"{self.owner}{'#' if self.instance else '.'}{self.member}"


@dataclass(frozen=True)
class SourceLocation:
    """
    Host-reported definition site.

    source_id     — host identifier of the script (maps back to a record index)
    line_number   — 1-based line, as hosts report it
    record_index  — load position of the script, when the host knows it;
                    disambiguates scripts sharing a source_id
    """
    source_id:    int
    line_number:  int
    record_index: Optional[int] = field(default=None, compare=False)


def parse_signature(text: str) -> Signature:
    """
    Parse *text* into a Signature.

    Raises:
        UnresolvedSignatureError: *text* is not of the form Type#method or Type.method.
    """
    m = _SIGNATURE_RE.match(text.strip())
    if not m:
        raise UnresolvedSignatureError(
            f"Malformed signature {text!r}; expected Type#method or Type.method"
        )
    return Signature(
        owner=m.group("owner"),
        member=m.group("member"),
        instance=m.group("sep") == "#",
    )
