from .block import Block, CodeSpace, Text, Blank, Element, BLANK
from .codegen import CodeBuilder
from .errors import CodeSpaceError, DepthExceeded, InvalidContent, BlockConsumedError
from .indent import IndentPolicy, DEFAULT_POLICY
from .render import walk, iter_lines, render
from .signatures import Visibility, Signature, ModuleSignature, FunctionSignature, CustomSignature
from .validation import validate_python, ValidationResult

__all__ = [
    # model
    "Block", "CodeSpace", "Text", "Blank", "Element", "BLANK",
    # building & rendering
    "CodeBuilder", "IndentPolicy", "DEFAULT_POLICY", "walk", "iter_lines", "render",
    # errors
    "CodeSpaceError", "DepthExceeded", "InvalidContent", "BlockConsumedError",
    # scope headers
    "Visibility", "Signature", "ModuleSignature", "FunctionSignature", "CustomSignature",
    # python output checks
    "validate_python", "ValidationResult",
]
