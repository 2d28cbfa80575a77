"""Expansion of command-line paths into the sorted list of modules."""

from __future__ import annotations

import os
from typing import Iterable, List

from .errors import FileIOError, InvalidInputError, NoInputError, NotFoundError
from .naming import SPV_EXT


def _list_dir(path: str) -> List[str]:
    """Direct children of *path* that are ``.spv`` files (no recursion)."""
    try:
        with os.scandir(path) as it:
            return [
                os.path.join(path, entry.name)
                for entry in it
                if entry.name.endswith(SPV_EXT) and entry.is_file()
            ]
    except OSError as exc:
        raise FileIOError("listing directory", path, exc) from exc


def collect_inputs(paths: Iterable[str]) -> List[str]:
    """Return the deduplicated, lexicographically sorted module paths.

    Directories contribute their direct ``.spv`` children and are not part
    of the result themselves.  A file argument without the ``.spv``
    extension is an error, as is an empty result.
    """
    found = set()
    for arg in paths:
        if not os.path.exists(arg):
            raise NotFoundError(arg)
        if os.path.isdir(arg):
            found.update(os.path.normpath(p) for p in _list_dir(arg))
        elif arg.endswith(SPV_EXT):
            found.add(os.path.normpath(arg))
        else:
            raise InvalidInputError(f"File {arg} is not an {SPV_EXT} file")

    if not found:
        raise NoInputError()
    return sorted(found)
