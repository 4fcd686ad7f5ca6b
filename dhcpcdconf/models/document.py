"""Line and file containers for parsed declarations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, Type

from dhcpcdconf.models.declarations import Declaration


@dataclass(frozen=True)
class Line:
    """Declarations of one physical line, in source order.

    Attributes:
        number: 1-based line number.
        declarations: Declarations left to right; empty for blank lines.
    """

    number: int
    declarations: Tuple[Declaration, ...] = ()

    def is_blank(self) -> bool:
        return not self.declarations

    def __iter__(self) -> Iterator[Declaration]:
        return iter(self.declarations)

    def __len__(self) -> int:
        return len(self.declarations)


@dataclass(frozen=True)
class ConfigFile:
    """A parsed dhcpcd.conf: one Line per physical line, in source order."""

    lines: Tuple[Line, ...] = ()

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def declarations(self) -> Iterator[Declaration]:
        """Yield every declaration in file order."""
        for line in self.lines:
            yield from line.declarations

    def find(self, kind: Type) -> Iterator[Declaration]:
        """Yield declarations that are instances of ``kind``, in file order."""
        for declaration in self.declarations():
            if isinstance(declaration, kind):
                yield declaration
