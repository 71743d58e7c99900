from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable


class Visibility(Enum):
    PUB = "pub"
    PUB_CRATE = "pub(crate)"
    PUB_SUPER = "pub(super)"
    PUB_SELF = "pub(self)"

    def __str__(self) -> str:
        return self.value


@runtime_checkable
class Signature(Protocol):
    """Anything that renders to one or more scope header lines."""

    def to_lines(self) -> list[str]: ...


def _with_visibility(visibility: Visibility | None, rest: str) -> str:
    return f"{visibility} {rest}" if visibility else rest


@dataclass
class ModuleSignature:
    name: str
    visibility: Visibility | None = None

    def to_lines(self) -> list[str]:
        return [_with_visibility(self.visibility, f"mod {self.name}")]


@dataclass
class FunctionSignature:
    name: str
    visibility: Visibility | None = None
    is_async: bool = False
    generics: list[str] = field(default_factory=list)
    params: list[tuple[str, str]] = field(default_factory=list)  # (name, type)
    return_type: str | None = None
    where_clauses: list[tuple[str, str]] = field(default_factory=list)  # (param, bound)

    def to_lines(self) -> list[str]:
        head = "async fn " if self.is_async else "fn "
        head += self.name
        if self.generics:
            head += f"<{', '.join(self.generics)}>"
        head += f"({', '.join(f'{n}: {t}' for n, t in self.params)})"
        if self.return_type:
            head += f" -> {self.return_type}"
        lines = [_with_visibility(self.visibility, head)]
        # The where clause sits on its own line at the header's depth.
        if self.where_clauses:
            lines.append("where " + ", ".join(f"{p}: {c}" for p, c in self.where_clauses))
        return lines


@dataclass
class CustomSignature:
    text: str

    def to_lines(self) -> list[str]:
        return [self.text]
