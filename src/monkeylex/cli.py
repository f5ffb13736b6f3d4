"""Command-line interface for monkeylex."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from monkeylex.errors import LexerError
from monkeylex.tokens import Token, TokenType

FORMATS = ("text", "json")

Extent = tuple[int, int, Token]


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    format: str
    strict: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="monkeylex",
        description="Dump the token stream of a source file",
    )
    p.add_argument("input", help="Input source file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: text)",
    )
    p.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Exit with status 1 if any illegal token is found",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover monkeylex.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Trace the cursor to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "monkeylex.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise argparse.ArgumentTypeError(f"invalid config file {path}: {exc}") from exc


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    fmt = "text"
    strict = False
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in FORMATS:
                raise argparse.ArgumentTypeError(
                    f"invalid output format in config (expected one of {', '.join(FORMATS)}): "
                    f"{cfg_format}"
                )
            fmt = cfg_format
        cfg_strict = cfg_output.get("strict")
        if isinstance(cfg_strict, bool):
            strict = cfg_strict

    if args.format is not None:
        fmt = args.format
    if args.strict is not None:
        strict = args.strict

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        format=fmt,
        strict=strict,
        debug=args.debug,
    )


def lex_file(options: CliOptions) -> list[Extent]:
    """Read and tokenize the input file, returning (start, end, token) triples."""
    from monkeylex.debug import dump_trace
    from monkeylex.lexer import Lexer, iter_extents

    lexer = Lexer.from_path(options.input_file)
    extents = list(iter_extents(lexer))

    if options.debug:
        dump_trace(extents, file=sys.stderr)

    return extents


def format_tokens(tokens: list[Token], fmt: str) -> str:
    """Render tokens in the requested output format."""
    if fmt == "json":
        items = [{"type": t.type.name, "value": t.value, "raw": t.raw} for t in tokens]
        return json.dumps(items, indent=2) + "\n"
    return "".join(f"{t.type.name}\t{t.raw!r}\n" for t in tokens)


def report_illegal(extents: list[Extent], *, file: TextIO | None = None) -> int:
    """Print one error line per illegal token; return how many were found."""
    if file is None:
        file = sys.stderr
    count = 0
    for start, _end, tok in extents:
        if tok.type == TokenType.ILLEGAL:
            print(f"error: illegal token {tok.raw!r} at offset {start}", file=file)
            count += 1
    return count


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s")

    try:
        extents = lex_file(options)
    except LexerError as exc:
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1

    output = format_tokens([tok for _, _, tok in extents], options.format)
    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    if options.strict and report_illegal(extents):
        return 1
    return 0
