"""Depth-first rendering of block trees.

Traversal keeps an explicit stack of child iterators instead of recursing,
so arbitrarily deep trees render without touching the interpreter's
recursion limit.
"""

from __future__ import annotations

import logging
from typing import Iterator

from .block import Blank, Block, CodeSpace, Element, Text
from .indent import DEFAULT_POLICY, IndentPolicy

logger = logging.getLogger(__name__)


def walk(root: Block, policy: IndentPolicy | None = None) -> Iterator[tuple[int, Element]]:
    """Yield ``(depth, element)`` for every line element, in insertion order.

    Each nested block adds one level, except blocks placed directly in a
    :class:`CodeSpace`, which share the space's level. When ``policy`` has a
    ``max_depth``, entering a block below it raises ``DepthExceeded``.
    """
    policy = policy or DEFAULT_POLICY
    # Each frame: (children iterator, depth of its lines, whether its blocks nest deeper)
    stack: list[tuple[Iterator, int, bool]] = [(iter(root), 0, not isinstance(root, CodeSpace))]
    while stack:
        children, depth, nests = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            continue
        if isinstance(child, Block):
            inner = depth + 1 if nests else depth
            policy.check_depth(inner)
            stack.append((iter(child), inner, True))
        elif isinstance(child, (Text, Blank)):
            yield depth, child
        else:
            raise TypeError(f"Unexpected block child: {type(child).__name__}")


def iter_lines(root: Block, policy: IndentPolicy | None = None) -> Iterator[str]:
    policy = policy or DEFAULT_POLICY
    for depth, element in walk(root, policy):
        if isinstance(element, Blank):
            yield ""
        else:
            yield policy.prefix(depth) + element.content


def render(root: Block, policy: IndentPolicy | None = None) -> str:
    """Render ``root`` to text, lines joined by ``\\n`` with no trailing newline."""
    lines = list(iter_lines(root, policy))
    logger.debug("Rendered %d lines from %r", len(lines), root)
    return "\n".join(lines)
