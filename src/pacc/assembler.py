from __future__ import annotations
import argparse, sys
from dataclasses import replace
from typing import List, Tuple

from .ast import Program
from .parser import parse
from .encoding import encode, EncodeResult
from .writers import write_program, write_listing
from .diagnostics import AsmError, Diagnostic, IoError, note

def assemble_text(text: str, *, filename: str | None = None) -> Tuple[Program, List[Diagnostic], EncodeResult]:
    """Analiza y codifica el texto completo.
    Devuelve (program, diagnostics, enc_result); el primer error se propaga como AsmError."""
    program = parse(text)
    enc = encode(program)
    diags = [d if filename is None else replace(d, file=filename) for d in enc.diagnostics]
    return program, diags, enc

def read_source(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as ex:
        raise IoError(ex) from ex

def assemble_file(path: str) -> Tuple[Program, List[Diagnostic], EncodeResult]:
    return assemble_text(read_source(path), filename=path)

def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="pacc",
        usage="%(prog)s <input-path> <output-path> [--listing PATH] [--verbose]",
        description="Assembler for the 8-bit pact instruction set",
        exit_on_error=False,
    )
    ap.add_argument("paths", nargs="*", metavar="PATH",
                    help="source file to read, then binary file to write")
    ap.add_argument("-l", "--listing", metavar="PATH",
                    help="also write a hex listing of the encoded program")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="print located diagnostics for failures and a summary on success")
    return ap

def _usage(ap: argparse.ArgumentParser) -> int:
    print(ap.format_usage(), end="", file=sys.stderr)
    return 0

def main(argv=None) -> int:
    ap = build_arg_parser()
    try:
        args, extra = ap.parse_known_args(argv)
    except argparse.ArgumentError:
        return _usage(ap)

    # argumentos sobrantes o un número de rutas distinto de 2: sólo se muestra el uso (código 0)
    if extra or len(args.paths) != 2:
        return _usage(ap)
    source, output = args.paths

    try:
        program, diags, enc = assemble_file(source)
    except AsmError as ex:
        print(f"failed to parse file: {ex}", file=sys.stderr)
        if args.verbose:
            print(ex.to_diagnostic(file=source), file=sys.stderr)
        return 1

    for d in diags:
        print(d, file=sys.stderr)

    try:
        written = write_program(output, enc.code)
    except IoError as ex:
        print(f"failed to write to file '{output}': {ex}", file=sys.stderr)
        return 1

    if args.listing:
        try:
            write_listing(enc.words, args.listing)
        except IoError as ex:
            print(f"failed to write to file '{args.listing}': {ex}", file=sys.stderr)
            return 1

    if args.verbose:
        print(note(f"{len(program)} instructions, {len(enc.code)} body bytes", file=source), file=sys.stderr)
    print(f"wrote {written} bytes to {output}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
