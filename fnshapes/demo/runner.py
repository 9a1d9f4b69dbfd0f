"""Demonstration routine invoking each example binding once, in order."""

from ..config.defaults import DemoParams
from ..logging.config import get_logger
from . import builtins as fi

logger = get_logger(__name__)


def run_demo(params: DemoParams = DemoParams()) -> None:
    """
    Print one line per demonstrated shape to standard output.

    Args:
        params: Demonstration inputs; defaults reproduce the reference output
    """
    name = params.name
    other = params.other
    random_double = (
        fi.random_double if params.random_seed == fi.RANDOM_SEED
        else fi.make_random_double(params.random_seed)
    )

    logger.info("Demonstration started", name=name, other=other,
                random_seed=params.random_seed)

    # Predicate / BiPredicate
    print(f"contains_mohamed? {fi.contains_mohamed.test(name)}")
    print(f"contains(other)? {fi.contains.test(name, other)}")

    # Supplier
    print(f"random_double: {random_double.get()}")

    # Consumer / BiConsumer
    fi.printer.accept("Hello from Consumer")
    fi.join_printer.accept("Hello", "World")

    # Function / BiFunction
    print(f"length(name): {fi.length.apply(name)}")
    print(f"concat_with_dash: {fi.concat_with_dash.apply('A', 'B')}")

    # Operators
    print(f"trim: '{fi.trim.apply('  hi  ')}'")
    print(f"max: {fi.max_.apply(10, 7)}")

    # Primitive specializations
    print(f"is_even(6): {fi.is_even.test(6)}")
    print(f"parse_or_zero('123'): {fi.parse_or_zero.apply_as_int('123')}")
    print(f"parse_or_zero('x'): {fi.parse_or_zero.apply_as_int('x')}")
    fi.int_printer.accept(fi.ten_supplier.get_as_int())

    logger.info("Demonstration finished")
