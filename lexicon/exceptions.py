"""
Project-wide custom exception hierarchy.
All modules raise subclasses of LexiconBaseError — never bare Exception.
"""

__all__ = [
    "LexiconBaseError",
    "RepositoryError",
    "NotFoundError",
    "ResolverError",
    "UnresolvedSignatureError",
    "PagerError",
    "InvalidCommandError",
    "LoaderError",
]


class LexiconBaseError(Exception):
    """Root exception for all lexicon errors."""


# ── Repository ────────────────────────────────────────────────────────────────

class RepositoryError(LexiconBaseError):
    """Raised when a script repository operation fails."""


class NotFoundError(RepositoryError):
    """Raised when no script name matches a query that targets one record."""


# ── Resolver ──────────────────────────────────────────────────────────────────

class ResolverError(LexiconBaseError):
    """Base class for signature resolution errors."""


class UnresolvedSignatureError(ResolverError):
    """Raised when a `Type#method` / `Type.method` signature cannot be located."""


# ── Pager ─────────────────────────────────────────────────────────────────────

class PagerError(LexiconBaseError):
    """Base class for pager errors."""


class InvalidCommandError(PagerError):
    """Raised by the command parser; caught by the pager loop and re-prompted."""


# ── Loader ────────────────────────────────────────────────────────────────────

class LoaderError(LexiconBaseError):
    """Raised when the persisted script corpus is malformed or unreadable."""
