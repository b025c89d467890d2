"""Abstract base class for all signature resolvers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .models import Signature, SourceLocation

__all__ = ["AbstractResolver", "NullResolver"]


class AbstractResolver(ABC):
    """
    Host introspection capability: maps a type + member name to the place
    where that member is defined.

    The repository never binds to a particular runtime; it is handed a
    resolver and translates the returned SourceLocation into its own
    record index / 0-based line.
    """

    @abstractmethod
    def resolve(self, signature: Signature) -> Optional[SourceLocation]:
        """
        Locate the definition of *signature*.

        Returns None when the type or member is unknown to the host.
        """

    @property
    @abstractmethod
    def kind(self) -> str:
        """Short name used by get_resolver() and the CLI `--resolver` flag."""


class NullResolver(AbstractResolver):
    """Resolver for hosts without introspection — nothing ever resolves."""

    @property
    def kind(self) -> str:
        return "none"

    def resolve(self, signature: Signature) -> Optional[SourceLocation]:
        return None
