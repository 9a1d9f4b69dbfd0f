"""
Error classification for functional shape declarations and bindings.

Every error here is raised at class-definition or bind time, before any
value flows through a shape.
"""

from .contract_errors import (
    ShapeDefinitionError,
    MissingAbstractOperationError,
    MultipleAbstractOperationsError,
    ShapeKindViolationError,
)
from .binding_errors import (
    ShapeBindingError,
    NotCallableError,
    ArityMismatchError,
    ReturnCategoryError,
    ParameterTypeError,
)
from .configuration import ConfigurationError

__all__ = [
    # Contract Errors
    "ShapeDefinitionError",
    "MissingAbstractOperationError",
    "MultipleAbstractOperationsError",
    "ShapeKindViolationError",
    # Binding Errors
    "ShapeBindingError",
    "NotCallableError",
    "ArityMismatchError",
    "ReturnCategoryError",
    "ParameterTypeError",
    # Configuration
    "ConfigurationError",
]
