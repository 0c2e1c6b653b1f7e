"""
Generic print dispatch.

print_objects() writes any mix of objects to one stream. Objects that can
render themselves (the Printable protocol, e.g. Matrix) are asked to do
so; everything else is written with str() followed by a newline.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from fixedmat.core.protocols import Printable


def print_objects(*objects: Any, out: TextIO | None = None, settings: Any = None) -> None:
    """
    Print each object in order.

    Args:
        *objects: Things to print; nothing is written when empty
        out: Destination stream; None means sys.stdout
        settings: Passed to every Printable's print(); ignored for
            plain objects

    Examples:
        >>> print_objects("A =", Matrix(2, 2, 1), out=sys.stdout)
        A =
          1   1
          1   1
    """
    out = sys.stdout if out is None else out
    for obj in objects:
        if isinstance(obj, Printable):
            obj.print(out, settings)
        else:
            out.write(f"{obj}\n")
