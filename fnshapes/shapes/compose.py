"""Composition helpers for shapes.

Free functions standing in for the helper methods a shape contract would
otherwise carry. Each accepts bound shapes or plain callables and returns a
new bound shape.

>>> from fnshapes.shapes.catalog import IntPredicate
>>> is_even = IntPredicate.of(lambda n: n % 2 == 0)
>>> negate(is_even).test(3)
True
"""

from typing import Any, Callable, Optional

from .catalog import (
    BiFunction,
    BinaryOperator,
    Function,
    Predicate,
    Supplier,
    UnaryOperator,
)
from .contract import Shape, shape_of
from .models import ShapeKind

_CHAIN_SHAPES = {0: Supplier, 1: Function, 2: BiFunction}


def _same_shape(value: Any, fallback: type) -> type:
    return shape_of(value) or fallback


def and_(first: Callable[..., bool], second: Callable[..., bool],
         shape: Optional[type] = None) -> Shape:
    """Short-circuiting logical AND of two predicates."""
    shape = shape or _same_shape(first, Predicate)
    return shape.of(lambda *args: bool(first(*args)) and bool(second(*args)))


def or_(first: Callable[..., bool], second: Callable[..., bool],
        shape: Optional[type] = None) -> Shape:
    """Short-circuiting logical OR of two predicates."""
    shape = shape or _same_shape(first, Predicate)
    return shape.of(lambda *args: bool(first(*args)) or bool(second(*args)))


def negate(predicate: Callable[..., bool], shape: Optional[type] = None) -> Shape:
    """Logical negation of a predicate, keeping its shape."""
    shape = shape or _same_shape(predicate, Predicate)
    return shape.of(lambda *args: not predicate(*args))


def not_(predicate: Callable[[Any], bool]) -> Shape:
    """Negated one-argument predicate as a plain ``Predicate``."""
    return negate(predicate, Predicate)


def is_equal(target: Any) -> Shape:
    """Predicate testing equality with ``target``; ``None`` equals only ``None``."""
    if target is None:
        return Predicate.of(lambda value: value is None)
    return Predicate.of(lambda value: target == value)


def identity() -> Shape:
    """Unary operator returning its input unchanged."""
    return UnaryOperator.of(lambda value: value)


def compose(after: Callable[[Any], Any], before: Callable[[Any], Any]) -> Shape:
    """Function applying ``before`` and then ``after``."""
    return Function.of(lambda value: after(before(value)))


def and_then(first: Callable[..., Any], after: Callable[..., Any],
             shape: Optional[type] = None) -> Shape:
    """
    Chain ``after`` behind ``first``.

    Consumers run both effects on the same arguments. Function-like shapes
    feed the result of ``first`` into ``after``. Consumers keep their own
    shape; everything else becomes a Supplier, Function or BiFunction by
    arity unless ``shape`` is given.
    """
    first_shape = shape_of(first)
    spec = first_shape.__shape__ if first_shape is not None else None
    arity = spec.arity if spec is not None else 1

    if spec is not None and spec.kind is ShapeKind.CONSUMER:
        def chained(*args: Any) -> None:
            first(*args)
            after(*args)

        return (shape or first_shape).of(chained)

    if shape is None:
        shape = _CHAIN_SHAPES.get(arity, BiFunction)
    if arity == 0:
        return shape.of(lambda: after(first()))
    return shape.of(lambda *args: after(first(*args)))


def min_by(key: Callable[[Any], Any]) -> Shape:
    """Binary operator returning the lesser operand by ``key``; ties keep the left."""
    return BinaryOperator.of(lambda left, right: left if key(left) <= key(right) else right)


def max_by(key: Callable[[Any], Any]) -> Shape:
    """Binary operator returning the greater operand by ``key``; ties keep the left."""
    return BinaryOperator.of(lambda left, right: left if key(left) >= key(right) else right)
