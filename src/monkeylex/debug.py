"""--debug cursor trace dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from monkeylex.tokens import Token


def dump_trace(extents: Iterable[tuple[int, int, Token]], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token with its start/end cursor offsets to *file*."""
    for start, end, tok in extents:
        file.write(f"{start:>6} {end:>6}  {tok.type.name:<10} {tok.raw!r}\n")
