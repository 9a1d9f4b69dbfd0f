"""
Shape data models for functional shape contracts.

This module defines the immutable description of a shape: its single
operation, arity, and the value kinds flowing in and out of it.
"""

import inspect
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ValueKind(str, Enum):
    """Semantic category of a parameter or return annotation."""
    VOID = "void"
    BOOLEAN = "boolean"
    INT = "int"
    DOUBLE = "double"
    OBJECT = "object"
    ANY = "any"


class ShapeKind(str, Enum):
    """Families of shapes with their own structural rules."""
    PREDICATE = "predicate"
    SUPPLIER = "supplier"
    CONSUMER = "consumer"
    FUNCTION = "function"
    OPERATOR = "operator"
    CUSTOM = "custom"


PRIMITIVE_KINDS = frozenset({ValueKind.BOOLEAN, ValueKind.INT, ValueKind.DOUBLE})


def classify(hint: Any) -> ValueKind:
    """Map a type annotation onto a ValueKind."""
    if hint is inspect.Parameter.empty or hint is Any or hint is object:
        return ValueKind.ANY
    if hint is None or hint is type(None):
        return ValueKind.VOID
    if hint is bool:
        return ValueKind.BOOLEAN
    if hint is int:
        return ValueKind.INT
    if hint is float:
        return ValueKind.DOUBLE
    return ValueKind.OBJECT


@dataclass(frozen=True)
class ShapeSpec:
    """Structural description of a validated shape contract."""

    name: str
    operation: str
    arity: int
    param_kinds: tuple[ValueKind, ...]
    return_kind: ValueKind
    kind: ShapeKind = ShapeKind.CUSTOM
    contract: Optional[type] = field(default=None, compare=False, repr=False)

    def describe(self) -> str:
        """Human-readable signature, e.g. ``IntPredicate.test(int) -> boolean``."""
        params = ", ".join(kind.value for kind in self.param_kinds)
        return f"{self.name}.{self.operation}({params}) -> {self.return_kind.value}"
