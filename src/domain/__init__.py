"""Domain layer: errors, schemas and the variable registry."""

from .errors import ErrorCodes, InputAbortedError, TemplateError
from .schemas import GenerationReport, Template
from .variables import (
    KNOWN_VARIABLES,
    DerivedRule,
    Variable,
    VariableRegistry,
)

__all__ = [
    "TemplateError",
    "InputAbortedError",
    "ErrorCodes",
    "Template",
    "GenerationReport",
    "Variable",
    "VariableRegistry",
    "DerivedRule",
    "KNOWN_VARIABLES",
]
