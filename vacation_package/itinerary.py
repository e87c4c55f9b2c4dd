"""Itinerary text blocks for individual products."""

from __future__ import annotations

import logging

from .models import Activity, Car, Flight, Hotel, Product, UnsupportedProductError
from .utils import format_amount, format_date, format_datetime


logger = logging.getLogger(__name__)

ITINERARY_HEADER = "Itinerary\n========="
SECTION_SEPARATOR = "\n\n"


def flight_block(flight: Flight) -> str:
    return (
        "Flight\n"
        "------\n"
        f"{flight.flight_number}: {flight.origin}-{flight.destination}\n"
        f"Dep: {format_datetime(flight.departure_time)}\n"
        f"Price: ${format_amount(flight.price)}"
    )


def hotel_block(hotel: Hotel) -> str:
    return (
        "Hotel\n"
        "-----\n"
        f"{hotel.id}\n"
        f"Check in:  {format_date(hotel.check_in_date)}\n"
        f"Check out: {format_date(hotel.check_out_date)}\n"
        f"Room rate: ${format_amount(hotel.room_rate)}/night"
    )


def car_block(car: Car) -> str:
    # No space after the colon on the vehicle line; the layout is fixed.
    return (
        "Car\n"
        "---\n"
        f"Vehicle type:{car.vehicle_type}\n"
        f"Pick up:  {format_date(car.pickup_date)}\n"
        f"Drop off: {format_date(car.drop_off_date)}\n"
        f"Daily rate: ${format_amount(car.daily_rate)}"
    )


def activity_block(activity: Activity) -> str:
    return (
        "Activity\n"
        "--------\n"
        f"{activity.id}\n"
        f"{format_datetime(activity.start_time)}\n"
        f"Cost: ${format_amount(activity.cost)}"
    )


def get_itinerary(product: Product) -> str:
    """Return the itinerary block for a single product, switching on its type."""

    if isinstance(product, Flight):
        return flight_block(product)
    elif isinstance(product, Hotel):
        return hotel_block(product)
    elif isinstance(product, Car):
        return car_block(product)
    elif isinstance(product, Activity):
        return activity_block(product)
    logger.error("Cannot describe %r", product)
    raise UnsupportedProductError(product)
