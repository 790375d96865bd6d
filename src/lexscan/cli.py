"""Command-line interface for lexscan."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lexscan.errors import InvalidInputError
from lexscan.render import FORMATS

STDIN = "-"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    output_file: Path | None
    fmt: str
    diagnostics: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="lexscan",
        description="Lexical scanner for C-family source files",
    )
    p.add_argument("input", help="Input source file ('-' for stdin)")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Token listing format (default: text)",
    )
    p.add_argument(
        "--diagnostics",
        action="store_true",
        default=None,
        help="Print scan diagnostics to stderr",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover lexscan.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens and declared names to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "lexscan.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    if args.input == STDIN:
        input_file = None
        input_dir = Path(".")
    else:
        input_file = Path(args.input)
        input_dir = input_file.parent
        if not input_dir.parts:
            input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    cfg_output = config.get("output")
    if not isinstance(cfg_output, dict):
        cfg_output = {}

    # Output format: default < config < CLI
    fmt = "text"
    cfg_fmt = cfg_output.get("format")
    if cfg_fmt is not None:
        if cfg_fmt not in FORMATS:
            raise argparse.ArgumentTypeError(
                f"invalid output format in config: {cfg_fmt!r} "
                f"(expected one of: {', '.join(FORMATS)})"
            )
        fmt = cfg_fmt
    if args.format is not None:
        fmt = args.format

    # Diagnostics: default < config < CLI
    diagnostics = False
    cfg_diag = cfg_output.get("diagnostics")
    if isinstance(cfg_diag, bool):
        diagnostics = cfg_diag
    if args.diagnostics is not None:
        diagnostics = args.diagnostics

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        fmt=fmt,
        diagnostics=diagnostics,
        debug=args.debug,
    )


def scan_file(options: CliOptions) -> str:
    """Read and scan an input file, returning the rendered token listing."""
    from lexscan.debug import dump_scan
    from lexscan.lexer import Scanner
    from lexscan.render import render

    if options.input_file is None:
        source = sys.stdin.read()
        filename = "<stdin>"
    else:
        source = options.input_file.read_text(encoding="utf-8")
        filename = str(options.input_file)

    scanner = Scanner(source, filename)
    tokens = scanner.scan()

    if options.debug:
        dump_scan(scanner, file=sys.stderr)

    if options.diagnostics:
        for diagnostic in scanner.diagnostics:
            print(diagnostic.format(source, filename), file=sys.stderr)

    return render(tokens, options.fmt)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except (argparse.ArgumentTypeError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    filename = str(options.input_file) if options.input_file else "<stdin>"
    try:
        listing = scan_file(options)
    except InvalidInputError as exc:
        print(exc.format(filename), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if options.output_file:
        options.output_file.write_text(listing, encoding="utf-8")
    else:
        sys.stdout.write(listing)

    return 0
