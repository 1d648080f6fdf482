"""
Schemas

Purpose: Export the error taxonomy and the serializable tree summary.
"""

from .errors import (
    ConfigurationException,
    ErrorCodes,
    HashTreeError,
    HashTreeException,
    InvalidInputException,
    StructuralPreconditionException,
)
from .tree import TreeSummary

__all__ = [
    "ConfigurationException",
    "ErrorCodes",
    "HashTreeError",
    "HashTreeException",
    "InvalidInputException",
    "StructuralPreconditionException",
    "TreeSummary",
]
