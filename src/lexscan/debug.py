"""--debug scan dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from lexscan.lexer import Scanner


def dump_scan(scanner: Scanner, *, file: TextIO = sys.stderr) -> None:
    """Print tokens with positions, the declared-name table and a diagnostic count."""
    file.write(f"Scan {scanner.filename}\n")
    for tok in scanner.tokens:
        start = tok.span.start
        file.write(f"  {start.line}:{start.column} {tok.kind.label} {tok.value!r}\n")
    names = ", ".join(sorted(scanner.declared)) or "(none)"
    file.write(f"Declared: {names}\n")
    file.write(f"Diagnostics: {len(scanner.diagnostics)}\n")
