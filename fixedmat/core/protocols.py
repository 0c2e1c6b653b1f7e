"""
Core protocols for fixedmat.

We use Protocol (structural typing) rather than ABC (nominal typing) so
that any object with a compatible print method takes part in the print
dispatcher without inheriting from a library class.
"""

from typing import Protocol, TextIO, Any, runtime_checkable


@runtime_checkable
class Printable(Protocol):
    """
    An object that knows how to render itself onto a text stream.

    The print dispatcher calls print(out, settings) on Printable objects and
    falls back to str() for everything else.
    """

    def print(self, out: TextIO | None = None, settings: Any = None) -> None:
        """
        Render onto a text stream.

        Args:
            out: Destination stream; None means sys.stdout
            settings: Formatting options understood by the implementation,
                or None for its defaults
        """
        ...
