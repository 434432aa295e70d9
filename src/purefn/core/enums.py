"""Enumerations for function composition."""

from enum import Enum


class ComposeOrder(Enum):
    """Order in which composed stages are applied to the input."""

    RIGHT_TO_LEFT = "rtl"
    LEFT_TO_RIGHT = "ltr"

    def arrange(self, fns: tuple) -> tuple:
        """Return the stages in application order.

        Args:
            fns: Stages as written by the caller.

        Returns:
            A new tuple with the first-applied stage at index 0.
        """
        if self is ComposeOrder.RIGHT_TO_LEFT:
            return tuple(reversed(fns))
        return tuple(fns)
