# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from dataclasses import dataclass

from backitup.core.config import CFG
from backitup.core.error import BackitupError


@dataclass(init=False)
class Size:
    """
    Represents the size of a file on disk.

    The value is stored internally in bytes. When converted to a string,
    it is displayed in the largest human-readable unit such that the relative
    rounding error does not exceed `CFG.size.max_rounding_error`.
    """

    value: int

    _unit_map = {
        "b": 1,
        "kb": 1024,
        "mb": 1024 * 1024,
        "gb": 1024 * 1024 * 1024,
        "tb": 1024 * 1024 * 1024 * 1024,
    }

    def __init__(self, value: int, unit: str = "b"):
        unit = unit.lower()
        if unit not in self._unit_map:
            raise BackitupError(f"Unsupported unit for size '{unit}'.")
        if value < 0:
            raise BackitupError(f"Size cannot be negative: '{value}{unit}'.")

        self.value = value * self._unit_map[unit]

    def __add__(self, other: "Size") -> "Size":
        """
        Add two Size instances.

        Args:
            other (Size): The Size instance to add.

        Returns:
            Size: A new Size instance representing the sum.
        """
        if not isinstance(other, Size):
            return NotImplemented

        return Size(self.value + other.value)

    def __str__(self) -> str:
        if self.value == 0:
            return "0b"

        for unit, factor in reversed(list(self._unit_map.items())):
            value = self.value / factor

            if value >= 1:
                rounded = round(value)
                # compute relative error from rounding
                approx = rounded * factor
                error = abs(approx - self.value) / self.value
                if error <= CFG.size.max_rounding_error or unit == "b":
                    return f"{rounded}{unit}"
                # otherwise, try smaller unit

        # should not get here
        return f"{self.value}b"
