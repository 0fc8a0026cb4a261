"""Console greeter writing one greeting line to standard output."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from greeter.domain.behaviors import build_greeting


@dataclass(frozen=True, slots=True)
class Greeter:
    """Stateless greeter bound to the process's standard output.

    Carries no fields, so every instance is interchangeable and repeated
    calls cannot leave anything behind.

    Example:
        >>> Greeter().greet("World")
        Hello, World!
    """

    def greet(self, name: str) -> None:
        """Write ``Hello, <name>!`` and a newline to stdout in a single write.

        The text goes out unmodified: escape sequences are not stripped, and
        undecodable command-line bytes (carried as surrogate escapes) are
        written back as the original bytes.

        Args:
            name: Addressee, used verbatim.
        """
        line = f"{build_greeting(name)}\n"
        stream = sys.stdout
        buffer = getattr(stream, "buffer", None)
        if buffer is None:
            stream.write(line)
            return
        stream.flush()
        buffer.write(line.encode(stream.encoding or "utf-8", errors="surrogateescape"))
        buffer.flush()


__all__ = ["Greeter"]
