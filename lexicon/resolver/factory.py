"""Factory function — returns the resolver for a given kind."""

from __future__ import annotations

from typing import Iterable

from lexicon.store.models import ScriptRecord

from .base import AbstractResolver, NullResolver
from .text_resolver import TextResolver

__all__ = ["get_resolver", "RESOLVER_KINDS"]

RESOLVER_KINDS = ("text", "none")


def get_resolver(kind: str, records: Iterable[ScriptRecord] = ()) -> AbstractResolver:
    """
    Return a resolver instance for *kind*.

    Parameters
    ----------
    kind    : "text" (scan script text) or "none" (never resolves)
    records : scripts the text resolver searches, in load order

    Raises
    ------
    ValueError for an unknown kind.
    """
    if kind == "text":
        return TextResolver(records)
    if kind == "none":
        return NullResolver()
    raise ValueError(f"Unknown resolver kind {kind!r}; expected one of {RESOLVER_KINDS}")
