"""
Contract error classifications for malformed shape declarations.

These exceptions are raised while a shape class is being defined, so a
malformed contract never becomes importable.
"""

from typing import Optional, Dict, Any


class ShapeDefinitionError(TypeError):
    """Base class for shape contracts that violate the single-operation rule."""

    def __init__(self, message: str, contract: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.contract = contract
        self.context = context or {}
        self.recoverable = False


class MissingAbstractOperationError(ShapeDefinitionError):
    """Contract declares no abstract operation at all."""


class MultipleAbstractOperationsError(ShapeDefinitionError):
    """Contract declares more than one abstract operation."""

    def __init__(self, message: str, operations: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operations = operations or []


class ShapeKindViolationError(ShapeDefinitionError):
    """Abstract operation signature is incompatible with the declared shape kind."""

    def __init__(self, message: str, kind: Optional[str] = None,
                 rule: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.kind = kind
        self.rule = rule
