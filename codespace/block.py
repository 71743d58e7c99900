"""Block tree model.

A :class:`Block` is an ordered list of line elements and nested blocks.
Insertion methods return the block itself so trees can be written as one
chained expression. Nesting a block moves it: the parent becomes its only
owner and the child refuses further use.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, Union

from .errors import BlockConsumedError, InvalidContent
from .indent import IndentPolicy, has_line_terminator

if TYPE_CHECKING:
    from .signatures import Signature


@dataclass(frozen=True)
class Text:
    content: str

    def __post_init__(self) -> None:
        if has_line_terminator(self.content):
            raise InvalidContent(self.content)


@dataclass(frozen=True)
class Blank:
    """An empty line. Never indented."""


Element = Union[Text, Blank]
Child = Union[Text, Blank, "Block"]

BLANK: Blank = Blank()


class Block:
    """Ordered container of lines, blank lines and nested blocks."""

    def __init__(self) -> None:
        self._children: list[Child] = []
        self._owned = False

    # ----------- construction ------------

    def insert_line(self, content: object) -> Block:
        text = Text(str(content))
        self._ensure_writable()
        self._children.append(text)
        return self

    def insert_line_if(self, cond: object, content: object) -> Block:
        text = Text(str(content))
        self._ensure_writable()
        if cond:
            self._children.append(text)
        return self

    def insert_lines(self, text: str) -> Block:
        """Append each line of ``text``; empty lines become blanks."""
        self._ensure_writable()
        for ln in text.splitlines():
            self._children.append(Text(ln) if ln else BLANK)
        return self

    def insert_new_line(self) -> Block:
        self._ensure_writable()
        self._children.append(BLANK)
        return self

    def insert_new_lines(self, count: int) -> Block:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        self._ensure_writable()
        self._children.extend([BLANK] * count)
        return self

    def insert_block(self, child: Block) -> Block:
        self._ensure_writable()
        self._adopt(child)
        self._children.append(child)
        return self

    def insert_scope(
        self,
        header: str | Signature,
        body: Block,
        opener: str = " {",
        closer: str | None = "}",
    ) -> Block:
        """Append ``header`` + ``opener``, then ``body`` one level deeper, then ``closer``.

        Pass ``opener=":"`` and ``closer=None`` for indentation-delimited
        languages.
        """
        lines = [header] if isinstance(header, str) else header.to_lines()
        if not lines:
            raise ValueError("Scope header must have at least one line.")
        head = [Text(ln) for ln in lines[:-1]]
        head.append(Text(lines[-1] + opener))
        tail = [Text(closer)] if closer is not None else []
        self._ensure_writable()
        self._adopt(body)
        nested = body
        if isinstance(self, CodeSpace):
            # Blocks directly in a space share its level; wrap so the body still nests.
            nested = Block()
            nested._children.append(body)
            nested._owned = True
        self._children.extend(head)
        self._children.append(nested)
        self._children.extend(tail)
        return self

    def _ensure_writable(self) -> None:
        if self._owned:
            raise BlockConsumedError("Block has been moved into a parent block and can no longer be modified.")

    def _adopt(self, child: Block) -> None:
        if isinstance(child, CodeSpace):
            raise TypeError("A CodeSpace is a top-level container and cannot be nested.")
        if not isinstance(child, Block):
            raise TypeError(f"Expected Block, got {type(child).__name__}")
        if child is self:
            raise BlockConsumedError("A block cannot be inserted into itself.")
        if child._owned:
            raise BlockConsumedError("Block already belongs to another parent block.")
        child._owned = True

    # ----------- read access ------------

    @property
    def children(self) -> tuple[Child, ...]:
        return tuple(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[Child]:
        return iter(self._children)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(children={len(self._children)})"

    # ----------- rendering ------------

    def iter_lines(self, policy: IndentPolicy | None = None) -> Iterator[str]:
        from .render import iter_lines

        return iter_lines(self, policy)

    def render(self, policy: IndentPolicy | None = None) -> str:
        from .render import render

        return render(self, policy)

    def __str__(self) -> str:
        return self.render()


@dataclass(repr=False, eq=False)
class CodeSpace(Block):
    """Top-level container carrying its own indentation settings.

    Blocks inserted directly into a space render flush with the space's own
    lines; only blocks nested inside them are indented.
    """

    indent_char: str = " "
    indent_depth: int = 2
    max_depth: int | None = None
    _children: list[Child] = field(default_factory=list, init=False)
    _owned: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        # Bad indent settings fail here rather than at render time.
        IndentPolicy.from_char(self.indent_char, self.indent_depth, max_depth=self.max_depth)

    @property
    def policy(self) -> IndentPolicy:
        return IndentPolicy.from_char(self.indent_char, self.indent_depth, max_depth=self.max_depth)

    def iter_lines(self, policy: IndentPolicy | None = None) -> Iterator[str]:
        return super().iter_lines(policy or self.policy)

    def render(self, policy: IndentPolicy | None = None) -> str:
        return super().render(policy or self.policy)
