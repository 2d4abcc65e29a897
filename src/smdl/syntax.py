"""Grammar constants for SMDL text."""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Characters
# ---------------------------------------------------------------------------

MARKER = "&"          # run length encodes depth: depth = len(run) - 1
ESCAPE = "\\"         # placed right before a run, makes it literal text
KEY_SEPARATOR = ":"   # first one splits key from value

# ---------------------------------------------------------------------------
# Layout used when rendering
# ---------------------------------------------------------------------------

INDENT = "  "
LINE_SEPARATOR = "\n"


def marker_run(depth: int) -> str:
    """Delimiter for a document at *depth*."""
    return MARKER * (depth + 1)


def indent(depth: int) -> str:
    return INDENT * depth
