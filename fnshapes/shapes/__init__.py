"""
Functional shapes: single-operation callable contracts.

Declare a shape with ``functional_shape``; bind closures with
``Shape.of`` or ``bind``.
"""

from .binding import bind
from .catalog import (
    ALL_SHAPES,
    BiConsumer,
    BiFunction,
    BinaryOperator,
    BiPredicate,
    BooleanSupplier,
    Consumer,
    DoubleBinaryOperator,
    DoubleConsumer,
    DoubleFunction,
    DoublePredicate,
    DoubleSupplier,
    DoubleUnaryOperator,
    Function,
    IntBinaryOperator,
    IntConsumer,
    IntFunction,
    IntPredicate,
    IntSupplier,
    IntUnaryOperator,
    ObjIntConsumer,
    Predicate,
    Supplier,
    ToDoubleFunction,
    ToIntBiFunction,
    ToIntFunction,
    UnaryOperator,
)
from .contract import Shape, functional_shape, shape_of, validate_contract
from .models import ShapeKind, ShapeSpec, ValueKind

__all__ = [
    "ALL_SHAPES",
    "BiConsumer",
    "BiFunction",
    "BinaryOperator",
    "BiPredicate",
    "BooleanSupplier",
    "Consumer",
    "DoubleBinaryOperator",
    "DoubleConsumer",
    "DoubleFunction",
    "DoublePredicate",
    "DoubleSupplier",
    "DoubleUnaryOperator",
    "Function",
    "IntBinaryOperator",
    "IntConsumer",
    "IntFunction",
    "IntPredicate",
    "IntSupplier",
    "IntUnaryOperator",
    "ObjIntConsumer",
    "Predicate",
    "Shape",
    "ShapeKind",
    "ShapeSpec",
    "Supplier",
    "ToDoubleFunction",
    "ToIntBiFunction",
    "ToIntFunction",
    "UnaryOperator",
    "ValueKind",
    "bind",
    "functional_shape",
    "shape_of",
    "validate_contract",
]
