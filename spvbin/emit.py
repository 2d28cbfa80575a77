"""Source emitters for the generated module table.

An emitter is fed in collection order::

    em = get_emitter("go", out, package="shaders", names=symbol_names("go"),
                     count=len(table))
    em.begin(table)
    for entry in table:
        em.add_module(read_module(entry.path))
    em.finish()

Each call writes straight to *out*, so a failure half-way leaves a partial
file behind.
"""

from __future__ import annotations

from typing import Dict, List, Sequence, TextIO, Type

from .decode import DecodedModule
from .naming import InputFile, SymbolNames

GEN_COMMENT = "Code generated by spvbin. DO NOT EDIT."

INVALID_INDEX_MSG = "Invalid spvbin index"
CLEARED_MSG = "spvbin data already cleared"


def format_word(word: int) -> str:
    return f"0x{word:08x}"


class Emitter:
    """Base class: bookkeeping shared by all target languages."""

    lang = ""
    default_output = ""

    def __init__(self, out: TextIO, package: str, names: SymbolNames,
                 count: int, clear_func: bool = False):
        self.out = out
        self.package = package
        self.names = names
        self.count = count
        self.clear_func = clear_func
        self._written = 0

    def begin(self, table: Sequence[InputFile]) -> None:
        if len(table) != self.count:
            raise ValueError(
                f"Expected {self.count} entries, got {len(table)}"
            )
        self._write_header()
        self._write_index(table)
        self._write_accessor()
        self._open_table()

    def add_module(self, module: DecodedModule) -> None:
        if self._written >= self.count:
            raise RuntimeError(f"More than {self.count} modules emitted")
        self._write_module(module.words.tolist())
        self._written += 1

    def finish(self) -> None:
        if self._written != self.count:
            raise RuntimeError(
                f"Only {self._written} of {self.count} modules emitted"
            )
        self._close_table()
        if self.clear_func:
            self._write_clear()

    # -- per-language hooks --------------------------------------------------

    def _write_header(self): raise NotImplementedError
    def _write_index(self, table): raise NotImplementedError
    def _write_accessor(self): raise NotImplementedError
    def _open_table(self): raise NotImplementedError
    def _write_module(self, words: List[int]): raise NotImplementedError
    def _close_table(self): raise NotImplementedError
    def _write_clear(self): raise NotImplementedError


# ═══════════════════════════════════════════════════════════════════════
#  Go
# ═══════════════════════════════════════════════════════════════════════
class GoEmitter(Emitter):
    lang = "go"
    default_output = "spvbin.go"

    def _write_header(self):
        self.out.write(f"// {GEN_COMMENT}\n\n")
        self.out.write(f"package {self.package}\n\n")

    def _write_index(self, table):
        t = self.names.index_type
        self.out.write(f"type {t} int\n\nconst (\n")
        for entry in table:
            if entry.index == 0:
                self.out.write(f"\t{entry.identifier} {t} = iota\n")
            else:
                self.out.write(f"\t{entry.identifier}\n")
        self.out.write(")\n\n")

    def _write_accessor(self):
        g, t = self.names.getter, self.names.index_type
        self.out.write(
            f"// {g} returns a SPIR-V module for the given index.\n"
            f"func {g}(which {t}) []uint32 {{\n"
            f"\tif which < 0 || which > {self.count - 1} {{\n"
            f"\t\tpanic(\"{INVALID_INDEX_MSG}\")\n"
            "\t}\n\n"
            "\tif _spvBin == nil {\n"
            f"\t\tpanic(\"{CLEARED_MSG}\")\n"
            "\t}\n\n"
            "\treturn _spvBin[which]\n"
            "}\n\n"
        )

    def _open_table(self):
        # Literals in Go source are always big-endian hex
        self.out.write("var _spvBin = [][]uint32{\n")

    def _write_module(self, words):
        body = ", ".join(format_word(w) for w in words)
        self.out.write(f"\t[]uint32{{{body}}},\n")

    def _close_table(self):
        self.out.write("}\n\n")

    def _write_clear(self):
        c = self.names.clear
        self.out.write(
            f"// {c} clears the embedded SPIR-V modules from memory.\n"
            f"func {c}() {{\n"
            "\t_spvBin = nil\n"
            "}\n\n"
        )


# ═══════════════════════════════════════════════════════════════════════
#  Python
# ═══════════════════════════════════════════════════════════════════════
class PythonEmitter(Emitter):
    lang = "python"
    default_output = "spvbin.py"

    WORDS_PER_LINE = 8

    def _write_header(self):
        self.out.write(f"# {GEN_COMMENT}\n")
        self.out.write(
            f'"""Embedded SPIR-V modules for package ``{self.package}``."""\n\n'
            "import enum\n\n\n"
        )

    def _write_index(self, table):
        self.out.write(f"class {self.names.index_type}(enum.IntEnum):\n")
        for entry in table:
            self.out.write(f"    {entry.identifier} = {entry.index}\n")
        self.out.write("\n\n")

    def _write_accessor(self):
        self.out.write(
            "class _ModuleTable:\n"
            '    """Embedded modules; unusable once cleared."""\n\n'
            '    __slots__ = ("_modules",)\n\n'
            "    def __init__(self, modules):\n"
            "        self._modules = modules\n\n"
            "    @property\n"
            "    def loaded(self):\n"
            "        return self._modules is not None\n\n"
            "    def get(self, which):\n"
            f"        if not 0 <= which < {self.count}:\n"
            f'            raise IndexError("{INVALID_INDEX_MSG}")\n'
            "        if self._modules is None:\n"
            f'            raise RuntimeError("{CLEARED_MSG}")\n'
            "        return self._modules[which]\n\n"
            "    def clear(self):\n"
            "        self._modules = None\n\n\n"
            f"def {self.names.getter}(which):\n"
            '    """Return the SPIR-V module for the given index as a tuple of words."""\n'
            "    return _spv_bin.get(which)\n\n\n"
        )

    def _open_table(self):
        self.out.write("_spv_bin = _ModuleTable((\n")

    def _write_module(self, words):
        self.out.write("    (\n")
        for i in range(0, len(words), self.WORDS_PER_LINE):
            line = ", ".join(format_word(w) for w in words[i:i + self.WORDS_PER_LINE])
            self.out.write(f"        {line},\n")
        self.out.write("    ),\n")

    def _close_table(self):
        self.out.write("))\n")

    def _write_clear(self):
        self.out.write(
            f"\n\ndef {self.names.clear}():\n"
            '    """Clear the embedded SPIR-V modules from memory."""\n'
            "    _spv_bin.clear()\n"
        )


EMITTERS: Dict[str, Type[Emitter]] = {
    GoEmitter.lang: GoEmitter,
    PythonEmitter.lang: PythonEmitter,
}


def get_emitter(lang: str, out: TextIO, package: str, names: SymbolNames,
                count: int, clear_func: bool = False) -> Emitter:
    try:
        cls = EMITTERS[lang]
    except KeyError:
        raise ValueError(f"No emitter for language '{lang}'") from None
    return cls(out, package, names, count, clear_func)
