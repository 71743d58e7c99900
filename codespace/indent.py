from __future__ import annotations

from dataclasses import dataclass

from .errors import DepthExceeded, InvalidContent

# Characters that str.splitlines() treats as line boundaries.
LINE_TERMINATORS: frozenset[str] = frozenset("\n\r\v\f\x1c\x1d\x1e\x85\u2028\u2029")


def has_line_terminator(text: str) -> bool:
    return any(ch in LINE_TERMINATORS for ch in text)


@dataclass(frozen=True)
class IndentPolicy:
    """How nesting depth maps to a line prefix.

    ``unit`` is repeated once per level. ``max_depth`` optionally caps how
    deep a rendered tree may nest; ``None`` means unbounded.
    """

    unit: str = "  "
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if has_line_terminator(self.unit):
            raise InvalidContent(self.unit)
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")

    @classmethod
    def spaces(cls, width: int = 2, max_depth: int | None = None) -> IndentPolicy:
        return cls.from_char(" ", width, max_depth=max_depth)

    @classmethod
    def tabs(cls, max_depth: int | None = None) -> IndentPolicy:
        return cls(unit="\t", max_depth=max_depth)

    @classmethod
    def from_char(cls, char: str, width: int, max_depth: int | None = None) -> IndentPolicy:
        if width < 0:
            raise ValueError(f"Indent width must be non-negative, got {width}")
        return cls(unit=char * width, max_depth=max_depth)

    def prefix(self, depth: int) -> str:
        if depth < 0:
            raise ValueError(f"Depth must be non-negative, got {depth}")
        return self.unit * depth

    def check_depth(self, depth: int) -> None:
        if self.max_depth is not None and depth > self.max_depth:
            raise DepthExceeded(depth, self.max_depth)


DEFAULT_POLICY: IndentPolicy = IndentPolicy()
