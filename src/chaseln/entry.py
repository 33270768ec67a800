from __future__ import annotations

import enum
import logging
import os
import stat
from typing import NamedTuple, Optional, Set, Union, TYPE_CHECKING

from chaseln import pathutils

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    import pathlib

    PathT = Union[str, os.PathLike[str], pathlib.Path]


class EntryKind(enum.Enum):
    SYMLINK = "🔗"
    DIRECTORY = "📁"
    FILE = "📄"
    DOES_NOT_EXIST = "❌"


class EntryPrefix(enum.Enum):
    # The entry the chase started from
    FIRST = ""
    # Reached by following the symlink of the previous entry
    DEREFERENCED = "→ "
    # The previous entry without its trailing slash
    TRIMMED_TRAILING_SLASH = "← "
    # Already visited, the chase is cyclic and ends here
    SEEN = "🔁 "


def label(prefix: EntryPrefix) -> str:
    return prefix.value


def icon(kind: EntryKind) -> str:
    return kind.value


def classify(path: str) -> EntryKind:
    """Classify `path` without following it if it is a symlink

    Failing to stat for any reason, permissions included, counts as not existing.
    """
    try:
        mode = os.lstat(path).st_mode
    except (OSError, ValueError) as e:
        _logger.debug("Could not stat %s: %s", path, e)
        return EntryKind.DOES_NOT_EXIST
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    return EntryKind.FILE


class Entry(NamedTuple):
    """One hop of a chase

    :param abs_location: Where the hop is in the filesystem, exactly as it was
        computed; a trailing slash is significant.
    :param display: How the hop was referred to, i.e. the text of the symlink that
        pointed to it, or the absolute path for the first entry.
    """

    abs_location: str
    display: str
    kind: EntryKind
    prefix: EntryPrefix

    @classmethod
    def at(
        cls, abs_location: str, prefix: EntryPrefix, display: Optional[str] = None
    ) -> Entry:
        return cls(
            abs_location=abs_location,
            display=abs_location if display is None else display,
            kind=classify(abs_location),
            prefix=prefix,
        )

    def __str__(self) -> str:
        return f"{label(self.prefix)}{icon(self.kind)} {self.display}"


class EntriesChain:
    """Iterator over the hops from a path to whatever it finally refers to

    Every pull returns the current entry and computes the one after it, so at most
    one link is read and one path is stat'ed per pull. Only a return to the first
    location is recognized as a cycle.

    >>> [str(entry) for entry in EntriesChain("/")]
    ['📁 /', '🔁 📁 /']
    """

    def __init__(self, abs_location: PathT) -> None:
        first = Entry.at(os.fspath(abs_location), EntryPrefix.FIRST)
        self._current: Optional[Entry] = first
        self._seen: Set[str] = {first.abs_location}

    def __iter__(self) -> EntriesChain:
        return self

    def __next__(self) -> Entry:
        entry = self._current
        if entry is None:
            raise StopIteration
        self._current = self._successor(entry)
        return entry

    def _successor(self, entry: Entry) -> Optional[Entry]:
        if entry.prefix is EntryPrefix.SEEN:
            return None
        if entry.kind is EntryKind.SYMLINK:
            return self._dereference(entry)
        if entry.kind is EntryKind.DIRECTORY:
            return self._trim(entry)
        return None

    def _dereference(self, entry: Entry) -> Optional[Entry]:
        try:
            target = pathutils.read_target(entry.abs_location)
        except OSError as e:
            _logger.debug("Could not read link %s: %s", entry.abs_location, e)
            return None
        parent = pathutils.parent_dir(entry.abs_location)
        if parent is None:
            _logger.debug("No parent for %s", entry.abs_location)
            return None
        location = pathutils.any_path_to_abs(parent, target)
        _logger.debug("Dereferenced %s to %s", entry.abs_location, location)
        return self._mark_seen(Entry.at(location, EntryPrefix.DEREFERENCED, target))

    def _trim(self, entry: Entry) -> Optional[Entry]:
        # A directory without a trailing slash is not a symlink posing as one
        if not pathutils.has_trailing_sep(entry.abs_location):
            return None
        location = pathutils.trim_trailing_slash(entry.abs_location)
        _logger.debug("Trimmed %s to %s", entry.abs_location, location)
        return self._mark_seen(Entry.at(location, EntryPrefix.TRIMMED_TRAILING_SLASH))

    def _mark_seen(self, entry: Entry) -> Entry:
        if entry.abs_location in self._seen:
            return entry._replace(prefix=EntryPrefix.SEEN)
        return entry


def chase(cwd: PathT, filename: PathT) -> EntriesChain:
    """Start chasing `filename`, which may be relative to `cwd`"""
    return EntriesChain(pathutils.any_path_to_abs(cwd, filename))
