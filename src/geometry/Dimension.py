from dataclasses import dataclass

from geometry.Freezable import Freezable


@dataclass
class Dimension(Freezable):
    width: float = 0
    height: float = 0

    def set_size(self, width: float, height: float) -> "Dimension":
        self.width = width
        self.height = height
        return self

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"
