"""
Catalog of built-in functional shapes.

Generic shapes take object values; primitive shapes fix ``int``, ``float``
or ``bool`` so bind-time checks can reject closures annotated with other
types. At runtime both families behave identically.
"""

from abc import abstractmethod
from typing import Generic, TypeVar

from .contract import Shape, functional_shape
from .models import ShapeKind

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


# Predicates

@functional_shape(kind=ShapeKind.PREDICATE)
class Predicate(Shape, Generic[T]):
    """Boolean test of one value."""

    @abstractmethod
    def test(self, value: T) -> bool: ...


@functional_shape(kind=ShapeKind.PREDICATE)
class BiPredicate(Shape, Generic[T, U]):
    """Boolean test of two values."""

    @abstractmethod
    def test(self, first: T, second: U) -> bool: ...


# Suppliers

@functional_shape(kind=ShapeKind.SUPPLIER)
class Supplier(Shape, Generic[T]):
    """Produces a value from no input."""

    @abstractmethod
    def get(self) -> T: ...


# Consumers

@functional_shape(kind=ShapeKind.CONSUMER)
class Consumer(Shape, Generic[T]):
    """Performs an effect on one value."""

    @abstractmethod
    def accept(self, value: T) -> None: ...


@functional_shape(kind=ShapeKind.CONSUMER)
class BiConsumer(Shape, Generic[T, U]):
    """Performs an effect on two values."""

    @abstractmethod
    def accept(self, first: T, second: U) -> None: ...


# Functions

@functional_shape(kind=ShapeKind.FUNCTION)
class Function(Shape, Generic[T, R]):
    """Transforms one value."""

    @abstractmethod
    def apply(self, value: T) -> R: ...


@functional_shape(kind=ShapeKind.FUNCTION)
class BiFunction(Shape, Generic[T, U, R]):
    """Transforms two values into one."""

    @abstractmethod
    def apply(self, first: T, second: U) -> R: ...


# Operators

@functional_shape(kind=ShapeKind.OPERATOR)
class UnaryOperator(Function[T, T]):
    """Function whose input and output types match."""

    @abstractmethod
    def apply(self, value: T) -> T: ...


@functional_shape(kind=ShapeKind.OPERATOR)
class BinaryOperator(BiFunction[T, T, T]):
    """BiFunction whose operands and result share one type."""

    @abstractmethod
    def apply(self, left: T, right: T) -> T: ...


# Primitive specializations

@functional_shape(kind=ShapeKind.PREDICATE)
class IntPredicate(Shape):
    @abstractmethod
    def test(self, value: int) -> bool: ...


@functional_shape(kind=ShapeKind.PREDICATE)
class DoublePredicate(Shape):
    @abstractmethod
    def test(self, value: float) -> bool: ...


@functional_shape(kind=ShapeKind.SUPPLIER)
class IntSupplier(Shape):
    @abstractmethod
    def get_as_int(self) -> int: ...


@functional_shape(kind=ShapeKind.SUPPLIER)
class DoubleSupplier(Shape):
    @abstractmethod
    def get_as_double(self) -> float: ...


@functional_shape(kind=ShapeKind.SUPPLIER)
class BooleanSupplier(Shape):
    @abstractmethod
    def get_as_boolean(self) -> bool: ...


@functional_shape(kind=ShapeKind.CONSUMER)
class IntConsumer(Shape):
    @abstractmethod
    def accept(self, value: int) -> None: ...


@functional_shape(kind=ShapeKind.CONSUMER)
class DoubleConsumer(Shape):
    @abstractmethod
    def accept(self, value: float) -> None: ...


@functional_shape(kind=ShapeKind.CONSUMER)
class ObjIntConsumer(Shape, Generic[T]):
    @abstractmethod
    def accept(self, value: T, number: int) -> None: ...


@functional_shape(kind=ShapeKind.FUNCTION)
class IntFunction(Shape, Generic[R]):
    @abstractmethod
    def apply(self, value: int) -> R: ...


@functional_shape(kind=ShapeKind.FUNCTION)
class DoubleFunction(Shape, Generic[R]):
    @abstractmethod
    def apply(self, value: float) -> R: ...


@functional_shape(kind=ShapeKind.FUNCTION)
class ToIntFunction(Shape, Generic[T]):
    @abstractmethod
    def apply_as_int(self, value: T) -> int: ...


@functional_shape(kind=ShapeKind.FUNCTION)
class ToIntBiFunction(Shape, Generic[T, U]):
    @abstractmethod
    def apply_as_int(self, first: T, second: U) -> int: ...


@functional_shape(kind=ShapeKind.FUNCTION)
class ToDoubleFunction(Shape, Generic[T]):
    @abstractmethod
    def apply_as_double(self, value: T) -> float: ...


@functional_shape(kind=ShapeKind.OPERATOR)
class IntUnaryOperator(Shape):
    @abstractmethod
    def apply_as_int(self, operand: int) -> int: ...


@functional_shape(kind=ShapeKind.OPERATOR)
class IntBinaryOperator(Shape):
    @abstractmethod
    def apply_as_int(self, left: int, right: int) -> int: ...


@functional_shape(kind=ShapeKind.OPERATOR)
class DoubleUnaryOperator(Shape):
    @abstractmethod
    def apply_as_double(self, operand: float) -> float: ...


@functional_shape(kind=ShapeKind.OPERATOR)
class DoubleBinaryOperator(Shape):
    @abstractmethod
    def apply_as_double(self, left: float, right: float) -> float: ...


GENERIC_SHAPES = (
    Predicate, BiPredicate, Supplier, Consumer, BiConsumer,
    Function, BiFunction, UnaryOperator, BinaryOperator,
)

PRIMITIVE_SHAPES = (
    IntPredicate, DoublePredicate,
    IntSupplier, DoubleSupplier, BooleanSupplier,
    IntConsumer, DoubleConsumer, ObjIntConsumer,
    IntFunction, DoubleFunction, ToIntFunction, ToIntBiFunction, ToDoubleFunction,
    IntUnaryOperator, IntBinaryOperator, DoubleUnaryOperator, DoubleBinaryOperator,
)

ALL_SHAPES = GENERIC_SHAPES + PRIMITIVE_SHAPES
