"""Exceptions raised by turtle_graphics."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from turtle_graphics.instructions import Instruction


class TurtleGraphicsError(Exception):
    pass


class ValidationError(TurtleGraphicsError, ValueError):
    """Bad construction parameters, e.g. for a raster canvas."""


class StackUnderflowError(TurtleGraphicsError, IndexError):
    """A position was popped from an empty position stack."""


class ReplayError(TurtleGraphicsError):
    """An instruction failed while a turtle was being replayed.

    The failing exception is available as ``__cause__``.
    """

    def __init__(self, index: int, total: int, instruction: Instruction) -> None:
        self.index = index
        self.total = total
        self.instruction = instruction
        super().__init__(
            f"Error executing instruction {index}/{total} ({instruction})"
        )

    def __str__(self) -> str:
        msg = super().__str__()
        if self.__cause__ is not None:
            msg = f"{msg}: {self.__cause__}"
        return msg


class ConfigError(ValueError):
    pass


def _require(cond: bool, msg: str, exc: type[Exception] = ConfigError) -> None:
    if not cond:
        raise exc(msg)
