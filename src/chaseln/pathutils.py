from __future__ import annotations

import os
import pathlib
from typing import Optional, Union, TYPE_CHECKING

if TYPE_CHECKING:
    PathT = Union[str, os.PathLike[str], pathlib.Path]

_SEPS = tuple(sep for sep in (os.sep, os.altsep) if sep)


def any_path_to_abs(parent: PathT, maybe_relative: PathT) -> str:
    """Make `maybe_relative` absolute by joining it onto `parent` if needed

    >>> any_path_to_abs("/tmp", "b")
    '/tmp/b'
    >>> any_path_to_abs("/tmp", "/etc/hosts")
    '/etc/hosts'
    """
    maybe_relative = os.fspath(maybe_relative)
    if os.path.isabs(maybe_relative):
        return maybe_relative
    return os.path.join(os.fspath(parent), maybe_relative)


def has_trailing_sep(path: str) -> bool:
    return path.endswith(_SEPS)


def trim_trailing_slash(path: str) -> str:
    """Lexically normalize a directory path

    Repeated separators, a trailing separator and ``.`` segments are dropped. Unlike
    :py:func:`os.path.normpath`, ``..`` segments are kept since collapsing them is
    only correct when no symlink to a directory precedes them.

    >>> trim_trailing_slash("/tmp//a/./b/../")
    '/tmp/a/b/..'
    """
    return str(pathlib.PurePath(path))


def parent_dir(path: str) -> Optional[str]:
    """Return the lexical parent of `path` or None if it has none

    >>> parent_dir("/tmp/d/")
    '/tmp'
    >>> parent_dir("/") is None
    True
    """
    pure = pathlib.PurePath(path)
    if pure.parent == pure:
        return None
    return str(pure.parent)


def read_target(path: str) -> str:
    """Return the text stored in the symlink at `path` without resolving it"""
    return os.readlink(path)
