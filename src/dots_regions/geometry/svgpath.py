"""Conversion between paths and SVG path data strings."""

import math
import re

from dots_regions.geometry.types import (
    Close,
    LineTo,
    MoveTo,
    Path,
    PlanePoint,
    QuadCurveTo,
)

_TOKEN_RE = re.compile(r"[A-Za-z]|[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_SEPARATOR_RE = re.compile(r"[\s,]+")

# Number of coordinates consumed by each supported command.
_ARITY = {"M": 2, "L": 2, "Q": 4, "Z": 0}


class PathSyntaxError(ValueError):
    """Raised when path data cannot be parsed."""


def _fmt(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def format_path(path: Path, precision: int = 2) -> str:
    """Render a path as SVG path data (``M``, ``L``, ``Q``, ``Z``)."""
    parts: list[str] = []
    for command in path:
        match command:
            case MoveTo(point=p):
                parts.append(f"M {_fmt(p.x, precision)} {_fmt(p.y, precision)}")
            case LineTo(point=p):
                parts.append(f"L {_fmt(p.x, precision)} {_fmt(p.y, precision)}")
            case QuadCurveTo(control=c, end=e):
                parts.append(
                    f"Q {_fmt(c.x, precision)} {_fmt(c.y, precision)} "
                    f"{_fmt(e.x, precision)} {_fmt(e.y, precision)}"
                )
            case Close():
                parts.append("Z")
    return " ".join(parts)


def _tokenize(d: str) -> list[str]:
    tokens: list[str] = []
    pos = 0
    while pos < len(d):
        sep = _SEPARATOR_RE.match(d, pos)
        if sep:
            pos = sep.end()
            continue
        token = _TOKEN_RE.match(d, pos)
        if token is None:
            raise PathSyntaxError(f"Unexpected character {d[pos]!r} at offset {pos}")
        tokens.append(token.group())
        pos = token.end()
    return tokens


def parse_path(d: str) -> Path:
    """Parse SVG path data made of move, line, quadratic and close commands.

    Both absolute and relative forms are accepted. Repeated coordinate
    groups after a command repeat it, and extra pairs after a move are
    treated as lines, as in SVG.

    Raises:
        PathSyntaxError: On unsupported commands, stray numbers or a
            truncated coordinate group.
    """
    tokens = _tokenize(d)
    path: Path = []
    current = PlanePoint(0.0, 0.0)
    subpath_start = current
    command: str | None = None
    i = 0

    while i < len(tokens):
        token = tokens[i]
        if token.isalpha():
            command = token
            i += 1
            if command.upper() not in _ARITY:
                raise PathSyntaxError(f"Unsupported path command {command!r}")
        elif command is None:
            raise PathSyntaxError(f"Path data must start with a command, got {token!r}")
        elif command in "Zz":
            raise PathSyntaxError(f"Unexpected number {token!r} after close")

        upper = command.upper()
        relative = command.islower()
        arity = _ARITY[upper]

        if upper == "Z":
            path.append(Close())
            current = subpath_start
            continue

        group = tokens[i : i + arity]
        if len(group) < arity or any(t.isalpha() for t in group):
            raise PathSyntaxError(f"Command {command!r} needs {arity} numbers")
        try:
            values = [float(t) for t in group]
        except ValueError as e:
            raise PathSyntaxError(str(e)) from e
        i += arity

        if relative:
            values = [v + (current.x if k % 2 == 0 else current.y) for k, v in enumerate(values)]
        if not all(math.isfinite(v) for v in values):
            raise PathSyntaxError(f"Command {command!r} has coordinates out of range: {group}")

        if upper == "M":
            current = PlanePoint(values[0], values[1])
            subpath_start = current
            path.append(MoveTo(current))
            # Further pairs after a move are implicit lines.
            command = "l" if relative else "L"
        elif upper == "L":
            current = PlanePoint(values[0], values[1])
            path.append(LineTo(current))
        else:
            current = PlanePoint(values[2], values[3])
            path.append(QuadCurveTo(control=PlanePoint(values[0], values[1]), end=current))

    return path
