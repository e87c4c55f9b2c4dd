"""Visitor based dispatch over products.

Each product's ``accept`` calls back exactly one ``visit_*`` method, so new
operations can be added as visitors without touching the product classes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .itinerary import ITINERARY_HEADER, SECTION_SEPARATOR, activity_block, car_block, flight_block, hotel_block
from .models import Activity, Car, Flight, Hotel, Number
from .pricing import activity_price, car_price, flight_price, hotel_price


class ProductVisitor(ABC):
    @abstractmethod
    def visit_flight(self, flight: Flight) -> None: ...

    @abstractmethod
    def visit_hotel(self, hotel: Hotel) -> None: ...

    @abstractmethod
    def visit_car(self, car: Car) -> None: ...

    @abstractmethod
    def visit_activity(self, activity: Activity) -> None: ...


class PricingVisitor(ProductVisitor):
    """Accumulates the total price of every product it visits."""

    def __init__(self) -> None:
        self.price: Number = 0

    def visit_flight(self, flight: Flight) -> None:
        self.price += flight_price(flight)

    def visit_hotel(self, hotel: Hotel) -> None:
        self.price += hotel_price(hotel)

    def visit_car(self, car: Car) -> None:
        self.price += car_price(car)

    def visit_activity(self, activity: Activity) -> None:
        self.price += activity_price(activity)


class ItineraryVisitor(ProductVisitor):
    """Builds the itinerary text, one section per visited product."""

    def __init__(self) -> None:
        self.itinerary = ITINERARY_HEADER

    def visit_flight(self, flight: Flight) -> None:
        self.itinerary += SECTION_SEPARATOR + flight_block(flight)

    def visit_hotel(self, hotel: Hotel) -> None:
        self.itinerary += SECTION_SEPARATOR + hotel_block(hotel)

    def visit_car(self, car: Car) -> None:
        self.itinerary += SECTION_SEPARATOR + car_block(car)

    def visit_activity(self, activity: Activity) -> None:
        self.itinerary += SECTION_SEPARATOR + activity_block(activity)
