"""
Pretty-printing of shaped arrays from their shape and flat scalars.

Layout rules
------------
- A rank-0 array prints its single scalar with `str`.
- Every scalar of a higher-rank array is left-padded to the width of the
  widest scalar in the whole array, so columns line up.
- Rank-1 vectors are wrapped at ``max(1, line_width // widest)`` scalars per
  line. Scalars on a line are joined by ``", "``; lines by ``",\\n"`` followed
  by ``indent + 1`` spaces.
- Higher ranks print their elements recursively, separated by ``","``, then
  ``rank - 1`` newlines, then ``indent + 1`` spaces.
- When summarizing, any dimension with more than ``2 * edge_element_count``
  elements prints only its edges around ``"..."``.

Example
-------
A 2x3 array holding 0..5 prints as::

    [[0, 1, 2],
     [3, 4, 5]]
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from ..shape._shape_math import shape_size


def _edge_indices(n: int, edge: int, summarizing: bool) -> List[Optional[int]]:
    """
    Return the element indices to print; ``None`` marks the ellipsis.
    """
    if summarizing and n > 2 * edge:
        return list(range(edge)) + [None] + list(range(n - edge, n))
    return list(range(n))


def _vector(
    texts: Sequence[str],
    indent: int,
    edge: int,
    width: int,
    per_line: int,
    summarizing: bool,
) -> str:
    cells = [
        "..." if i is None else texts[i].rjust(width)
        for i in _edge_indices(len(texts), edge, summarizing)
    ]
    lines = [", ".join(cells[i : i + per_line]) for i in range(0, len(cells), per_line)]
    return "[" + (",\n" + " " * (indent + 1)).join(lines) + "]"


def _nested(
    shape: Sequence[int],
    texts: Sequence[str],
    indent: int,
    edge: int,
    width: int,
    per_line: int,
    summarizing: bool,
) -> str:
    if not shape:
        return texts[0]
    if len(shape) == 1:
        return _vector(texts, indent, edge, width, per_line, summarizing)

    inner = shape[1:]
    block = shape_size(inner)
    parts = []
    for i in _edge_indices(shape[0], edge, summarizing):
        if i is None:
            parts.append("...")
            continue
        parts.append(
            _nested(
                inner,
                texts[i * block : (i + 1) * block],
                indent + 1,
                edge,
                width,
                per_line,
                summarizing,
            )
        )
    separator = "," + "\n" * (len(shape) - 1) + " " * (indent + 1)
    return "[" + separator.join(parts) + "]"


def describe(
    shape: Sequence[int],
    scalars: Sequence[Any],
    line_width: int = 80,
    edge_element_count: int = 3,
    summarizing: bool = False,
) -> str:
    """
    Render a shaped array as a multi-line, column-aligned string.

    Parameters
    ----------
    shape : Sequence[int]
        Array shape.
    scalars : Sequence[Any]
        Flat row-major scalars; ``len(scalars) == prod(shape)``.
    line_width : int, optional
        Maximum line width for vectors. Defaults to 80.
    edge_element_count : int, optional
        Elements kept on each side of ``...`` when summarizing. Defaults to 3.
    summarizing : bool, optional
        Summarize dimensions longer than ``2 * edge_element_count``.

    Returns
    -------
    str
        The rendered description.
    """
    texts = [str(s) for s in scalars]
    width = max((len(t) for t in texts), default=3)
    per_line = max(1, line_width // max(1, width))
    return _nested(tuple(shape), texts, 0, edge_element_count, width, per_line, summarizing)


def full_describe(shape: Sequence[int], scalars: Sequence[Any]) -> str:
    """
    Render every scalar on a single line without padding or wrapping.

    A 2x2 array holding 1..4 prints as ``[[1, 2], [3, 4]]``.
    """
    if not shape:
        return str(scalars[0])
    block = shape_size(shape[1:])
    return (
        "["
        + ", ".join(
            full_describe(shape[1:], scalars[i * block : (i + 1) * block])
            for i in range(shape[0])
        )
        + "]"
    )
