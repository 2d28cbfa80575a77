"""Command-line interface: ``spvbin [options] PATH...``."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from . import __version__
from .emit import EMITTERS
from .errors import SpvbinError
from .generate import GeneratorOptions, generate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spvbin",
        description="Embed SPIR-V modules (.spv) into a generated source file.",
    )
    parser.add_argument("paths", nargs="*", metavar="PATH",
                        help=".spv files or directories containing them")
    parser.add_argument("--export", action="store_true",
                        help="Use exported names for the generated symbols")
    parser.add_argument("--package", default="",
                        help="Name of the package in the output file")
    parser.add_argument("--output", default=None,
                        help="Name of the output file (default: spvbin.go, "
                             "or spvbin.py with --lang python)")
    parser.add_argument("--clear-func", action="store_true",
                        help="Include a function that clears the modules from memory")
    parser.add_argument("--lang", choices=sorted(EMITTERS), default="go",
                        help="Language of the generated file (default: go)")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print a summary on success")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    opts = GeneratorOptions(
        package=args.package,
        output=args.output,
        export=args.export,
        clear_func=args.clear_func,
        lang=args.lang,
    )

    try:
        result = generate(args.paths, opts)
    except SpvbinError as exc:
        print(f"[spvbin] error: {exc}", file=sys.stderr)
        return exc.exit_code

    if not args.quiet:
        print(f"[spvbin] Wrote {len(result.modules)} module(s), "
              f"{result.words} words to {result.output}")
    return 0
