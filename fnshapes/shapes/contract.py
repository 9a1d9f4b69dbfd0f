"""
Shape contracts and the single-abstract-operation rule.

A shape is an abstract class deriving from ``Shape`` and decorated with
``functional_shape``. The decorator inspects the class when it is defined
and rejects it unless exactly one abstract operation remains after
discounting abstract redeclarations of methods ``object`` already
implements (``__str__``, ``__eq__``, ...). Concrete methods, static methods
and class methods may be added freely.

Accepted contracts get a ``__shape__`` spec and a frozen ``__bound__``
implementation class used by ``bind`` to wrap closures.
"""

import abc
import inspect
import typing
from abc import ABC
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, NoReturn, Optional

from ..errors import (
    MissingAbstractOperationError,
    MultipleAbstractOperationsError,
    ShapeDefinitionError,
    ShapeKindViolationError,
)
from ..logging.config import get_shape_logger, log_binding_decision
from .models import ShapeKind, ShapeSpec, ValueKind, classify

OBJECT_METHODS = frozenset(dir(object))

# Generated by the bound dataclass, never filled from object
_DATACLASS_METHODS = frozenset({"__init__", "__repr__", "__setattr__", "__delattr__"})

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


class Shape(ABC):
    """
    Base class for every functional shape.

    Instances are callable: ``shape(*args)`` forwards to the shape's single
    operation, so bound shapes can be handed to any code expecting a plain
    Python callable.
    """

    __shape__: ClassVar[ShapeSpec]
    __bound__: ClassVar[type]

    def __call__(self, *args: Any) -> Any:
        return getattr(self, self.__shape__.operation)(*args)

    @classmethod
    def of(cls, fn: Callable[..., Any], **options: Any) -> "Shape":
        """Bind ``fn`` to this shape. See ``fnshapes.shapes.binding.bind``."""
        from .binding import bind

        return bind(cls, fn, **options)


def abstract_operations(cls: type) -> list[str]:
    """Abstract methods of ``cls`` that ``object`` does not already implement."""
    abstract = getattr(cls, "__abstractmethods__", frozenset())
    return sorted(name for name in abstract if name not in OBJECT_METHODS)


def _resolve_hints(func: Callable[..., Any]) -> dict[str, Any]:
    try:
        return typing.get_type_hints(func)
    except (NameError, TypeError):
        return {}


def _reject(error: ShapeDefinitionError, name: str, kind: ShapeKind) -> NoReturn:
    log_binding_decision(
        get_shape_logger(__name__),
        shape_name=name,
        accepted=False,
        target=name,
        reason=str(error),
        context={"kind": kind.value},
    )
    raise error


def _kind_violation(spec: ShapeSpec, hints: dict[str, Any],
                    params: list[inspect.Parameter]) -> Optional[tuple[str, str]]:
    """Return ``(rule, message)`` for the first kind rule ``spec`` breaks."""
    kind = spec.kind

    if kind is ShapeKind.SUPPLIER and spec.arity != 0:
        return "no_parameters", f"supplier '{spec.operation}' must not declare parameters"

    if kind is ShapeKind.PREDICATE and spec.return_kind is not ValueKind.BOOLEAN:
        return "boolean_return", f"predicate '{spec.operation}' must return bool"

    if kind is ShapeKind.CONSUMER and spec.return_kind is not ValueKind.VOID:
        return "void_return", f"consumer '{spec.operation}' must return None"

    if kind in (ShapeKind.SUPPLIER, ShapeKind.FUNCTION, ShapeKind.OPERATOR) \
            and spec.return_kind is ValueKind.VOID:
        return "value_return", f"{kind.value} '{spec.operation}' must return a value"

    if kind is ShapeKind.OPERATOR:
        if spec.arity == 0:
            return "operands", f"operator '{spec.operation}' needs at least one operand"
        returned = hints.get("return", inspect.Parameter.empty)
        for param in params:
            if hints.get(param.name, inspect.Parameter.empty) != returned:
                return (
                    "matching_types",
                    f"operator '{spec.operation}' parameter '{param.name}' "
                    "must have the same type as its return",
                )

    return None


def validate_contract(cls: type, kind: ShapeKind = ShapeKind.CUSTOM) -> ShapeSpec:
    """
    Validate a shape contract and describe it.

    Args:
        cls: Abstract class deriving from Shape
        kind: Shape family whose structural rules apply

    Returns:
        ShapeSpec for the single abstract operation

    Raises:
        ShapeDefinitionError: If the class is not a valid single-operation contract
    """
    name = cls.__name__

    if not (isinstance(cls, type) and issubclass(cls, Shape)):
        raise ShapeDefinitionError(
            f"{name} must derive from Shape", contract=name
        )

    operations = abstract_operations(cls)
    if not operations:
        _reject(MissingAbstractOperationError(
            f"{name} declares no abstract operation", contract=name
        ), name, kind)
    if len(operations) > 1:
        _reject(MultipleAbstractOperationsError(
            f"{name} declares {len(operations)} abstract operations: "
            f"{', '.join(operations)}",
            operations=operations,
            contract=name,
        ), name, kind)

    operation = operations[0]
    raw = inspect.getattr_static(cls, operation)
    if not inspect.isfunction(raw):
        _reject(ShapeDefinitionError(
            f"{name}.{operation} must be an instance method", contract=name
        ), name, kind)

    params = list(inspect.signature(raw).parameters.values())[1:]
    for param in params:
        if param.kind not in _POSITIONAL or param.default is not inspect.Parameter.empty:
            _reject(ShapeDefinitionError(
                f"{name}.{operation} parameter '{param.name}' must be a plain positional parameter",
                contract=name,
            ), name, kind)

    hints = _resolve_hints(raw)
    spec = ShapeSpec(
        name=name,
        operation=operation,
        arity=len(params),
        param_kinds=tuple(
            classify(hints.get(param.name, inspect.Parameter.empty)) for param in params
        ),
        return_kind=classify(hints.get("return", inspect.Parameter.empty)),
        kind=kind,
        contract=cls,
    )

    violation = _kind_violation(spec, hints, params)
    if violation is not None:
        rule, message = violation
        _reject(ShapeKindViolationError(
            f"{name}: {message}", kind=kind.value, rule=rule, contract=name
        ), name, kind)

    return spec


def _build_bound_class(cls: type, spec: ShapeSpec) -> type:
    """Create the frozen implementation class that wraps a closure."""

    def invoke(self: Any, *args: Any) -> Any:
        return self.fn(*args)

    invoke.__name__ = spec.operation
    invoke.__qualname__ = f"Bound{cls.__name__}.{spec.operation}"

    namespace: dict[str, Any] = {
        "__module__": cls.__module__,
        "__qualname__": f"Bound{cls.__name__}",
        "__annotations__": {"fn": Callable[..., Any]},
        spec.operation: invoke,
    }
    # Abstract redeclarations of object methods keep object's behaviour
    for name in getattr(cls, "__abstractmethods__", frozenset()):
        if name in OBJECT_METHODS and name not in _DATACLASS_METHODS:
            namespace[name] = getattr(object, name)

    bound = type(cls)(f"Bound{cls.__name__}", (cls,), namespace)
    bound = dataclass(frozen=True, eq=False)(bound)
    abc.update_abstractmethods(bound)
    return bound


def functional_shape(cls: Optional[type] = None, *, kind: ShapeKind = ShapeKind.CUSTOM):
    """
    Class decorator declaring a functional shape.

    Usable bare (``@functional_shape``) for custom shapes or with a kind
    (``@functional_shape(kind=ShapeKind.PREDICATE)``) to apply that
    family's rules.
    """

    def decorate(target: type) -> type:
        spec = validate_contract(target, kind)
        target.__shape__ = spec
        target.__bound__ = _build_bound_class(target, spec)
        return target

    if cls is not None:
        return decorate(cls)
    return decorate


def is_shape(cls: Any) -> bool:
    """True when ``cls`` itself was declared with ``functional_shape``."""
    return isinstance(cls, type) and "__shape__" in cls.__dict__


def shape_of(value: Any) -> Optional[type]:
    """Contract class a shape instance implements, or None for plain callables."""
    spec = getattr(type(value), "__shape__", None)
    if spec is None:
        return None
    return spec.contract
