"""A single named bit of a bitmask type."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Bit:
    """A named flag value.

    Attributes:
        name: Name used to refer to the bit in strings such as "read|write"
        value: Integer value of the bit, normally a single power of two
    """
    name: str
    value: int

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise TypeError(f"Bit name must be a string, got {type(self.name).__name__}")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Bit '{self.name}' expects integer value, got {type(self.value).__name__}")
        if self.value <= 0:
            raise ValueError(f"Bit '{self.name}' value {self.value} must be positive")

    def __int__(self) -> int:
        return self.value
