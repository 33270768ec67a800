from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Sequence

import chaseln
from chaseln import entry

_logger = logging.getLogger(__name__)

_HELP_FLAGS = ("--help", "-h")


def chase(path: str) -> None:
    """Print every hop from `path` to whatever it finally refers to

    Each line shows how the hop was reached, what kind of file it is and how it was
    referred to.

    :param path: Path to chase, absolute or relative to the working directory
    """
    try:
        cwd = os.getcwd()
    except OSError:
        _logger.error("Could not determine the current working directory")
        raise
    for hop in entry.chase(cwd, path):
        print(hop)


def main(argv: Optional[Sequence[str]] = None) -> None:
    import fire  # type: ignore

    logging.basicConfig(level=getattr(logging, os.environ.get("LEVEL", "WARNING")))
    args = list(sys.argv[1:] if argv is None else argv)
    if "--version" in args:
        print(chaseln.__version__)
        return
    # Quoted so fire keeps every argument a string and treats none as its own flag
    command = [arg if arg in _HELP_FLAGS else repr(arg) for arg in args]
    fire.Fire(chase, command=command, name="chaseln")
