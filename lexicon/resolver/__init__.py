"""
Signature resolution — maps `Type#method` / `Type.method` to a definition site.

The repository depends only on AbstractResolver; hosts with real
introspection plug in their own implementation.
"""

from .base import AbstractResolver, NullResolver
from .factory import RESOLVER_KINDS, get_resolver
from .models import Signature, SourceLocation, parse_signature
from .text_resolver import TextResolver

__all__ = [
    "AbstractResolver",
    "NullResolver",
    "TextResolver",
    "get_resolver",
    "RESOLVER_KINDS",
    "Signature",
    "SourceLocation",
    "parse_signature",
]
