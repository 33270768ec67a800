"""Follow a path through its symlinks and trailing slashes, one hop at a time"""
from chaseln.entry import (
    EntriesChain,
    Entry,
    EntryKind,
    EntryPrefix,
    chase,
    classify,
)

__version__ = "0.1.0"

__all__ = [
    "EntriesChain",
    "Entry",
    "EntryKind",
    "EntryPrefix",
    "chase",
    "classify",
    "__version__",
]
