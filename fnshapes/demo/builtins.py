"""
Example closures bound to the built-in shapes.

Each binding is created once at import time and never rebound. The string
helpers tolerate ``None`` the way their edge-case rules require: ``length``
reports 0, ``trim`` passes it through and the containment tests answer
``False``.
"""

import random
import re
from typing import Optional

from ..shapes.catalog import (
    BiConsumer,
    BiFunction,
    BinaryOperator,
    BiPredicate,
    Consumer,
    Function,
    IntConsumer,
    IntPredicate,
    IntSupplier,
    Predicate,
    Supplier,
    ToIntFunction,
    UnaryOperator,
)
from ..utils.fallback import soft_fail

RANDOM_SEED = 42


contains_mohamed: Predicate[str] = Predicate.of(
    lambda s: s is not None and "Mohamed" in s
)

contains: BiPredicate[str, str] = BiPredicate.of(
    lambda s, part: s is not None and part is not None and part in s
)


def make_random_double(seed: int = RANDOM_SEED) -> Supplier[float]:
    """Supplier that reseeds a fresh generator on every call."""
    return Supplier.of(lambda: random.Random(seed).random())


random_double: Supplier[float] = make_random_double()

printer: Consumer[str] = Consumer.of(print)

join_printer: BiConsumer[str, str] = BiConsumer.of(
    lambda a, b: print(f"{a} {b}")
)

length: Function[Optional[str], int] = Function.of(
    lambda s: 0 if s is None else len(s)
)

concat_with_dash: BiFunction[str, str, str] = BiFunction.of(
    lambda a, b: f"{a}-{b}"
)

trim: UnaryOperator[Optional[str]] = UnaryOperator.of(
    lambda s: None if s is None else s.strip()
)

max_: BinaryOperator[int] = BinaryOperator.of(max)

is_even: IntPredicate = IntPredicate.of(lambda n: n % 2 == 0)


_INT_TEXT = re.compile(r"[+-]?\d+")
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


@soft_fail(0)
def _parse_int(s: Optional[str]) -> int:
    """Signed decimal digits only, within the 32-bit int range."""
    if not _INT_TEXT.fullmatch(s):
        raise ValueError(f"not an integer: {s!r}")
    value = int(s)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"integer out of range: {s!r}")
    return value


parse_or_zero: ToIntFunction[Optional[str]] = ToIntFunction.of(_parse_int)

ten_supplier: IntSupplier = IntSupplier.of(lambda: 10)

int_printer: IntConsumer = IntConsumer.of(lambda n: print(f"int={n}"))
