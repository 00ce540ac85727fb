"""Priced products."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Product(ABC):
    """Something sold at a price; subclasses say how it is described."""

    name: str
    price: float

    @abstractmethod
    def description(self) -> str:
        """Return the text that names this product."""

    def __str__(self) -> str:
        return f"{self.description()} - {self.price:g} lei"