from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

import libcst as cst

from .block import Block
from .indent import IndentPolicy

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    errors: List[str]


def validate_python(source: str | Block, policy: IndentPolicy | None = None) -> ValidationResult:
    """Check that rendered text parses as a Python module.

    ``source`` may be an already rendered string or a block, which is
    rendered with ``policy`` first. Parse failures are reported, not raised.
    """
    code = source.render(policy) if isinstance(source, Block) else source
    # LibCST wants a terminated final line.
    if code and not code.endswith("\n"):
        code += "\n"
    try:
        cst.parse_module(code)
    except cst.ParserSyntaxError as e:
        logger.debug("Generated code failed to parse: %s", e)
        return ValidationResult(False, [f"LibCST parse error: {e}"])
    return ValidationResult(True, [])
