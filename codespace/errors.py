from __future__ import annotations


class CodeSpaceError(Exception):
    """Base class for errors raised while building or rendering blocks."""


class DepthExceeded(CodeSpaceError):
    def __init__(self, depth: int, max_depth: int) -> None:
        super().__init__(f"Nesting depth {depth} exceeds the configured maximum of {max_depth}.")
        self.depth = depth
        self.max_depth = max_depth


class InvalidContent(CodeSpaceError, ValueError):
    """A line was given text that spans more than one line."""

    def __init__(self, content: str) -> None:
        super().__init__(f"Line content must not contain line terminators: {content!r}")
        self.content = content


class BlockConsumedError(CodeSpaceError):
    """A block was used after being moved into a parent block."""
