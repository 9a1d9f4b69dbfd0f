"""Tests for the built-in shape catalog."""

import pytest

from fnshapes.shapes import catalog
from fnshapes.shapes.catalog import (
    ALL_SHAPES,
    GENERIC_SHAPES,
    PRIMITIVE_SHAPES,
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
from fnshapes.shapes.contract import is_shape
from fnshapes.shapes.models import PRIMITIVE_KINDS, ShapeKind, ValueKind


class TestCatalogStructure:
    """Every catalog entry is a validated single-operation shape."""

    @pytest.mark.parametrize("shape", ALL_SHAPES, ids=lambda s: s.__name__)
    def test_every_shape_declared(self, shape: type) -> None:
        """Each catalog class carries its own spec and bound class."""
        assert is_shape(shape)
        assert shape.__shape__.contract is shape
        assert issubclass(shape.__bound__, shape)

    @pytest.mark.parametrize("shape,operation,arity,return_kind", [
        (Predicate, "test", 1, ValueKind.BOOLEAN),
        (BiPredicate, "test", 2, ValueKind.BOOLEAN),
        (Supplier, "get", 0, ValueKind.OBJECT),
        (Consumer, "accept", 1, ValueKind.VOID),
        (BiConsumer, "accept", 2, ValueKind.VOID),
        (Function, "apply", 1, ValueKind.OBJECT),
        (BiFunction, "apply", 2, ValueKind.OBJECT),
        (UnaryOperator, "apply", 1, ValueKind.OBJECT),
        (BinaryOperator, "apply", 2, ValueKind.OBJECT),
    ], ids=lambda v: getattr(v, "__name__", None))
    def test_generic_shape_specs(self, shape: type, operation: str,
                                 arity: int, return_kind: ValueKind) -> None:
        """Generic shapes match the arity/return table."""
        spec = shape.__shape__
        assert spec.operation == operation
        assert spec.arity == arity
        assert spec.return_kind is return_kind

    def test_operator_kinds(self) -> None:
        """Operators specialize functions."""
        assert UnaryOperator.__shape__.kind is ShapeKind.OPERATOR
        assert issubclass(UnaryOperator, Function)
        assert issubclass(BinaryOperator, BiFunction)

    def test_primitive_shapes_are_primitive(self) -> None:
        """Primitive variants fix an unboxed kind somewhere in their signature."""
        for shape in PRIMITIVE_SHAPES:
            spec = shape.__shape__
            kinds = spec.param_kinds + (spec.return_kind,)
            assert any(kind in PRIMITIVE_KINDS for kind in kinds), shape.__name__

    def test_catalog_partitions(self) -> None:
        """ALL_SHAPES is the generic and primitive catalogs together."""
        assert set(ALL_SHAPES) == set(GENERIC_SHAPES) | set(PRIMITIVE_SHAPES)
        assert len(ALL_SHAPES) == len(set(ALL_SHAPES))

    def test_describe(self) -> None:
        """Specs render a readable signature."""
        assert IntPredicate.__shape__.describe() == "IntPredicate.test(int) -> boolean"
        assert ObjIntConsumer.__shape__.describe() == "ObjIntConsumer.accept(object, int) -> void"

    def test_exports_cover_catalog(self) -> None:
        """Every catalog shape is importable from the package."""
        import fnshapes.shapes as shapes

        for shape in ALL_SHAPES:
            assert getattr(shapes, shape.__name__) is shape
            assert getattr(catalog, shape.__name__) is shape


class TestPrimitiveShapes:
    """Primitive variants bind and invoke like their generic counterparts."""

    def test_int_shapes(self, capsys) -> None:
        """Int-specialized shapes."""
        assert IntPredicate.of(lambda n: n > 0).test(1) is True
        assert IntSupplier.of(lambda: 3).get_as_int() == 3
        assert IntFunction.of(lambda n: "x" * n).apply(3) == "xxx"
        assert ToIntFunction.of(len).apply_as_int("abcd") == 4
        assert ToIntBiFunction.of(lambda a, b: len(a) + len(b)).apply_as_int("ab", "c") == 3
        assert IntUnaryOperator.of(lambda n: -n).apply_as_int(4) == -4
        assert IntBinaryOperator.of(lambda a, b: a * b).apply_as_int(6, 7) == 42

        IntConsumer.of(lambda n: print(f"n={n}")).accept(5)
        ObjIntConsumer.of(lambda s, n: print(s * n)).accept("ab", 2)
        assert capsys.readouterr().out == "n=5\nabab\n"

    def test_double_shapes(self, capsys) -> None:
        """Double-specialized shapes."""
        assert DoublePredicate.of(lambda x: x < 0.5).test(0.25) is True
        assert DoubleSupplier.of(lambda: 1.5).get_as_double() == 1.5
        assert DoubleFunction.of(lambda x: f"{x:.1f}").apply(2.0) == "2.0"
        assert ToDoubleFunction.of(lambda s: float(len(s))).apply_as_double("abc") == 3.0
        assert DoubleUnaryOperator.of(lambda x: x / 2).apply_as_double(3.0) == 1.5
        assert DoubleBinaryOperator.of(lambda a, b: a + b).apply_as_double(0.5, 0.25) == 0.75

        DoubleConsumer.of(lambda x: print(x)).accept(0.5)
        assert capsys.readouterr().out == "0.5\n"

    def test_boolean_supplier(self) -> None:
        """BooleanSupplier returns bool."""
        assert BooleanSupplier.of(lambda: True).get_as_boolean() is True


class TestDirectImplementation:
    """Classes may implement a shape by subclassing it."""

    def test_subclass_implements_operation(self) -> None:
        """A concrete subclass is a shape instance without binding."""

        class Shout(UnaryOperator):
            def apply(self, value: str) -> str:
                return value.upper() + "!"

        shout = Shout()
        assert shout.apply("hey") == "HEY!"
        assert shout("hey") == "HEY!"
        assert isinstance(shout, Function)

    def test_abstract_shape_not_instantiable(self) -> None:
        """The contract itself stays abstract."""
        with pytest.raises(TypeError):
            Predicate()
