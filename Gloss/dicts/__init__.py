from __future__ import annotations

from .provider import (
    Descriptor,
    DictionaryProvider,
    TableProvider,
    build_tables,
)
from .builtin import BUILTIN_PHRASES, BUILTIN_WORDS, builtin_provider, load_builtin_tables

__all__ = [
    "BUILTIN_PHRASES",
    "BUILTIN_WORDS",
    "Descriptor",
    "DictionaryProvider",
    "TableProvider",
    "build_tables",
    "builtin_provider",
    "load_builtin_tables",
]
