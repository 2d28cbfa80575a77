"""Mapping from input files to generated identifiers."""

from __future__ import annotations

import os
from typing import Iterable, List, NamedTuple

from .errors import IdentifierCollisionError, InvalidInputError

SPV_EXT = ".spv"


class InputFile(NamedTuple):
    path: str
    identifier: str
    index: int


class SymbolNames(NamedTuple):
    """Spellings of the generated symbols for one language / export mode."""

    prefix: str
    index_type: str
    getter: str
    clear: str


# (lang, export) -> names
_SYMBOLS = {
    ("go", True):      SymbolNames("SPV_", "SPVModuleIndex", "GetSPV", "SPVClear"),
    ("go", False):     SymbolNames("spv_", "spvModuleIndex", "getSPV", "spvClear"),
    ("python", True):  SymbolNames("SPV_", "SPVModuleIndex", "get_spv", "spv_clear"),
    ("python", False): SymbolNames("spv_", "_SPVModuleIndex", "_get_spv", "_spv_clear"),
}

LANGUAGES = ("go", "python")


def symbol_names(lang: str = "go", export: bool = False) -> SymbolNames:
    try:
        return _SYMBOLS[(lang, bool(export))]
    except KeyError:
        raise ValueError(
            f"Unsupported language '{lang}'. Expected one of {', '.join(LANGUAGES)}."
        ) from None


def identifier_for(path: str, export: bool = False) -> str:
    """Constant name for *path*: ``basic.frag.spv`` -> ``spv_basic_frag``."""
    base = os.path.basename(path)
    if base.endswith(SPV_EXT):
        base = base[: -len(SPV_EXT)]
    prefix = symbol_names("go", export).prefix
    return prefix + base.replace(".", "_")


def build_naming_table(files: Iterable[str], export: bool = False) -> List[InputFile]:
    """Assign identifiers and positional indices to already sorted *files*.

    Raises :class:`InvalidInputError` for names that do not form an
    identifier and :class:`IdentifierCollisionError` when two files map to
    the same constant.
    """
    table: List[InputFile] = []
    seen = {}
    for index, path in enumerate(files):
        ident = identifier_for(path, export)
        if not ident.isidentifier():
            raise InvalidInputError(
                f"File {path} does not map to a valid identifier ('{ident}')"
            )
        if ident in seen:
            raise IdentifierCollisionError(ident, seen[ident], path)
        seen[ident] = path
        table.append(InputFile(path, ident, index))
    return table
