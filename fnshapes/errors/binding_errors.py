"""
Binding error classifications for closures that do not fit a shape.

Raised by bind() before the closure is ever invoked.
"""

from typing import Optional, Dict, Any


class ShapeBindingError(TypeError):
    """Base class for closures rejected by a shape."""

    def __init__(self, message: str, shape_name: Optional[str] = None,
                 target: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.shape_name = shape_name
        self.target = target
        self.context = context or {}
        self.recoverable = False


class NotCallableError(ShapeBindingError):
    """Bound value is not callable."""


class ArityMismatchError(ShapeBindingError):
    """Closure cannot accept the shape's number of positional arguments."""

    def __init__(self, message: str, expected: Optional[int] = None,
                 signature: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.expected = expected
        self.signature = signature


class ReturnCategoryError(ShapeBindingError):
    """Annotated closure return does not match the shape's return kind."""

    def __init__(self, message: str, expected: Optional[str] = None,
                 actual: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.expected = expected
        self.actual = actual


class ParameterTypeError(ShapeBindingError):
    """Annotated closure parameter does not match a primitive shape parameter."""

    def __init__(self, message: str, parameter: Optional[str] = None,
                 expected: Optional[str] = None, actual: Optional[str] = None,
                 **kwargs):
        super().__init__(message, **kwargs)
        self.parameter = parameter
        self.expected = expected
        self.actual = actual
