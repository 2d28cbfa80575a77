"""End-to-end generation: collect, name, decode and emit."""

from __future__ import annotations

import os
from typing import List, NamedTuple, Optional, Sequence

from .collect import collect_inputs
from .decode import read_module
from .emit import EMITTERS, get_emitter
from .errors import ConfigError, FileIOError
from .naming import InputFile, build_naming_table, symbol_names


class GeneratorOptions(NamedTuple):
    package: str
    output: Optional[str] = None      # None -> language default
    export: bool = False
    clear_func: bool = False
    lang: str = "go"


class GenerationResult(NamedTuple):
    output: str
    modules: List[InputFile]
    words: int


def default_output(lang: str) -> str:
    return EMITTERS[lang].default_output


def validate_options(opts: GeneratorOptions) -> None:
    if not opts.package:
        raise ConfigError("No package name given")
    if not opts.package.isidentifier():
        raise ConfigError(f"Package name '{opts.package}' is not a valid identifier")
    if opts.lang not in EMITTERS:
        raise ConfigError(f"Unsupported language '{opts.lang}'")


def _create_output(path: str):
    out_dir = os.path.dirname(path)
    if out_dir:
        try:
            os.makedirs(out_dir, exist_ok=True)
        except OSError as exc:
            raise FileIOError("creating output file directory", out_dir, exc) from exc
    try:
        return open(path, "w", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise FileIOError("creating output file", path, exc) from exc


def generate(paths: Sequence[str], opts: GeneratorOptions) -> GenerationResult:
    """Embed the modules found in *paths* into a single generated source file.

    Steps run strictly in order; the first error aborts the run and the
    output file may be left partially written.
    """
    validate_options(opts)
    files = collect_inputs(paths)
    table = build_naming_table(files, opts.export)
    output = opts.output or default_output(opts.lang)

    names = symbol_names(opts.lang, opts.export)
    total = 0
    with _create_output(output) as out:
        emitter = get_emitter(opts.lang, out, opts.package, names,
                              len(table), opts.clear_func)
        emitter.begin(table)
        for entry in table:
            module = read_module(entry.path)
            emitter.add_module(module)
            total += len(module.words)
        emitter.finish()

    return GenerationResult(output, table, total)
