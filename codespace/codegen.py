from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

from .block import Block
from .indent import IndentPolicy


@dataclass
class CodeBuilder:
    """
    Imperative, indentation-aware front-end over :class:`Block`.
    Each ``with cb.block():`` opens one nested block; lines written inside
    land one level deeper. With a :class:`CodeSpace` root the first level
    stays flush, as blocks placed directly in a space do, and ``policy``
    defaults to the space's own settings.
    """
    policy: IndentPolicy | None = None
    root: Block = field(default_factory=Block)
    _stack: list[Block] = field(default_factory=list, init=False, repr=False)

    @property
    def level(self) -> int:
        return len(self._stack)

    @property
    def current(self) -> Block:
        return self._stack[-1] if self._stack else self.root

    def write(self, line: str = "") -> None:
        if line:
            self.current.insert_line(line)
        else:
            self.current.insert_new_line()

    def writelines(self, raw: str) -> None:
        for ln in raw.splitlines():
            self.write(ln)

    @contextmanager
    def block(self) -> Iterator[Block]:
        parent = self.current
        child = Block()
        self._stack.append(child)
        try:
            yield child
        finally:
            self._stack.pop()
            parent.insert_block(child)

    def render(self) -> str:
        return self.root.render(self.policy)
