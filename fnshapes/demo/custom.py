"""
A user-declared shape.

``MessageSource`` has one abstract operation. Its abstract ``__str__``
redeclares a method ``object`` already implements, so it does not count;
the static and default methods do not count either.
"""

from abc import abstractmethod

from ..shapes.contract import Shape, functional_shape


@functional_shape
class MessageSource(Shape):
    """Produces a message on demand."""

    @abstractmethod
    def message(self) -> str: ...

    @abstractmethod
    def __str__(self) -> str: ...

    @staticmethod
    def describe() -> str:
        return "MessageSource supplies a message with no input"

    def announce(self) -> str:
        """Default operation built on the abstract one."""
        return f"message: {self.message()}"
