"""
Closure binding for functional shapes.

``bind`` checks a closure against a shape's single operation before the
closure can ever be invoked, then wraps it in the shape's frozen bound
class. Checks that need introspection degrade quietly: builtins without a
signature skip them, unannotated closures skip the annotation checks.
"""

import inspect
import typing
from typing import Any, Callable, Optional

from ..config.defaults import BindingParams
from ..errors import (
    ArityMismatchError,
    NotCallableError,
    ParameterTypeError,
    ReturnCategoryError,
    ShapeBindingError,
    ShapeDefinitionError,
)
from ..logging.config import get_shape_logger, log_binding_decision
from .contract import Shape, is_shape
from .models import PRIMITIVE_KINDS, ShapeSpec, ValueKind, classify

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)

_binding_defaults = BindingParams()


def configure_binding(params: BindingParams) -> None:
    """Set the checks bind() applies when a call does not choose them."""
    global _binding_defaults
    _binding_defaults = params


def get_binding_defaults() -> BindingParams:
    """Checks bind() currently applies by default."""
    return _binding_defaults


def describe_callable(fn: Any) -> str:
    """Short, log-friendly name for a closure."""
    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    return name or repr(fn)


def _signature(fn: Callable[..., Any]) -> Optional[inspect.Signature]:
    try:
        return inspect.signature(fn)
    except (TypeError, ValueError):
        return None


def _closure_hints(fn: Callable[..., Any], signature: inspect.Signature) -> dict[str, Any]:
    hints = {
        name: param.annotation
        for name, param in signature.parameters.items()
        if param.annotation is not inspect.Parameter.empty
    }
    if signature.return_annotation is not inspect.Signature.empty:
        hints["return"] = signature.return_annotation

    # Postponed annotations arrive as strings
    if any(isinstance(hint, str) for hint in hints.values()):
        try:
            hints.update(typing.get_type_hints(fn))
        except (NameError, TypeError):
            hints = {k: v for k, v in hints.items() if not isinstance(v, str)}

    return hints


def return_compatible(expected: ValueKind, actual: ValueKind) -> bool:
    """Whether a closure returning ``actual`` satisfies a shape returning ``expected``."""
    if ValueKind.ANY in (expected, actual):
        return True
    if expected is ValueKind.VOID:
        return actual is ValueKind.VOID
    if actual is ValueKind.VOID:
        return False
    if expected is ValueKind.OBJECT:
        return True
    if expected is ValueKind.DOUBLE:
        return actual in (ValueKind.INT, ValueKind.DOUBLE)
    return actual is expected


def param_compatible(expected: ValueKind, actual: ValueKind) -> bool:
    """Whether a closure parameter typed ``actual`` accepts a primitive ``expected``."""
    if expected not in PRIMITIVE_KINDS or actual is ValueKind.ANY:
        return True
    return actual is expected


class _Binder:
    """Runs the bind-time checks for one shape/closure pair."""

    def __init__(self, shape: type, fn: Any) -> None:
        self.shape = shape
        self.spec: ShapeSpec = shape.__shape__
        self.fn = fn
        self.target = describe_callable(fn)
        self.logger = get_shape_logger(__name__)

    def reject(self, error: ShapeBindingError) -> typing.NoReturn:
        log_binding_decision(
            self.logger,
            shape_name=self.spec.name,
            accepted=False,
            target=self.target,
            reason=str(error),
            context={"signature": self.spec.describe()},
        )
        raise error

    def accept(self, reason: str) -> Shape:
        log_binding_decision(
            self.logger,
            shape_name=self.spec.name,
            accepted=True,
            target=self.target,
            reason=reason,
        )
        return self.shape.__bound__(self.fn)

    def check_arity(self, signature: inspect.Signature) -> None:
        try:
            signature.bind(*([None] * self.spec.arity))
        except TypeError:
            self.reject(ArityMismatchError(
                f"{self.target}{signature} cannot be bound to {self.spec.describe()}: "
                f"expected {self.spec.arity} positional argument(s)",
                expected=self.spec.arity,
                signature=str(signature),
                shape_name=self.spec.name,
                target=self.target,
            ))

    def check_return(self, hints: dict[str, Any]) -> None:
        if "return" not in hints:
            return
        actual = classify(hints["return"])
        if not return_compatible(self.spec.return_kind, actual):
            self.reject(ReturnCategoryError(
                f"{self.target} returns {actual.value}, "
                f"{self.spec.describe()} requires {self.spec.return_kind.value}",
                expected=self.spec.return_kind.value,
                actual=actual.value,
                shape_name=self.spec.name,
                target=self.target,
            ))

    def check_params(self, signature: inspect.Signature, hints: dict[str, Any]) -> None:
        positional = [
            param for param in signature.parameters.values() if param.kind in _POSITIONAL
        ][:self.spec.arity]

        for param, expected in zip(positional, self.spec.param_kinds):
            actual = classify(hints.get(param.name, inspect.Parameter.empty))
            if not param_compatible(expected, actual):
                self.reject(ParameterTypeError(
                    f"{self.target} parameter '{param.name}' is {actual.value}, "
                    f"{self.spec.describe()} passes {expected.value}",
                    parameter=param.name,
                    expected=expected.value,
                    actual=actual.value,
                    shape_name=self.spec.name,
                    target=self.target,
                ))


def bind(
    shape: type,
    fn: Callable[..., Any],
    *,
    check_annotations: Optional[bool] = None,
    strict_primitive_params: Optional[bool] = None,
) -> Shape:
    """
    Bind a closure to a functional shape.

    Args:
        shape: Class declared with ``functional_shape``
        fn: Closure implementing the shape's single operation
        check_annotations: Reject closures whose annotated return does not
            match the shape's return kind (default from configure_binding)
        strict_primitive_params: Reject closures whose annotated parameters
            do not match a primitive shape's parameter kinds (default from
            configure_binding)

    Returns:
        Immutable shape instance wrapping ``fn``

    Raises:
        ShapeDefinitionError: If ``shape`` is not a declared shape
        ShapeBindingError: If ``fn`` does not fit the shape
    """
    if check_annotations is None:
        check_annotations = _binding_defaults.check_annotations
    if strict_primitive_params is None:
        strict_primitive_params = _binding_defaults.strict_primitive_params

    shape = typing.get_origin(shape) or shape
    if not is_shape(shape):
        raise ShapeDefinitionError(
            f"{getattr(shape, '__name__', shape)!s} is not a functional shape"
        )

    binder = _Binder(shape, fn)

    if not callable(fn):
        binder.reject(NotCallableError(
            f"{type(fn).__name__} object cannot be bound to {binder.spec.describe()}",
            shape_name=binder.spec.name,
            target=binder.target,
        ))

    signature = _signature(fn)
    if signature is None:
        return binder.accept("signature unavailable, checks skipped")

    binder.check_arity(signature)

    hints = _closure_hints(fn, signature)
    if check_annotations:
        binder.check_return(hints)
    if strict_primitive_params:
        binder.check_params(signature, hints)

    return binder.accept("signature matches")
