"""Core data models for vacation package products.

Products are unrelated to each other: they do not inherit from a common
base class. Each one exposes ``accept`` so a ``ProductVisitor`` can be
dispatched on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .visitors import ProductVisitor


Number = Union[int, float]


class UnsupportedProductError(TypeError):
    """Raised when a dispatch site receives something that is not a product."""

    def __init__(self, product: object) -> None:
        super().__init__(f"Unsupported product type: {type(product).__name__}")
        self.product = product


@dataclass(frozen=True)
class Flight:
    flight_number: str
    origin: str
    destination: str
    departure_time: datetime
    price: Number

    def accept(self, visitor: ProductVisitor) -> None:
        visitor.visit_flight(self)


@dataclass(frozen=True)
class Hotel:
    id: str
    check_in_date: datetime
    check_out_date: datetime
    room_rate: Number

    def accept(self, visitor: ProductVisitor) -> None:
        visitor.visit_hotel(self)


@dataclass(frozen=True)
class Car:
    vehicle_type: str
    pickup_date: datetime
    drop_off_date: datetime
    daily_rate: Number

    def accept(self, visitor: ProductVisitor) -> None:
        visitor.visit_car(self)


@dataclass(frozen=True)
class Activity:
    id: str
    start_time: datetime
    cost: Number

    def accept(self, visitor: ProductVisitor) -> None:
        visitor.visit_activity(self)


Product = Union[Flight, Hotel, Car, Activity]
