"""Price calculation for individual products."""

from __future__ import annotations

import logging

from .models import Activity, Car, Flight, Hotel, Number, Product, UnsupportedProductError
from .utils import num_days


logger = logging.getLogger(__name__)


def flight_price(flight: Flight) -> Number:
    return flight.price


def hotel_price(hotel: Hotel) -> Number:
    return num_days(hotel.check_in_date, hotel.check_out_date) * hotel.room_rate


def car_price(car: Car) -> Number:
    return num_days(car.pickup_date, car.drop_off_date) * car.daily_rate


def activity_price(activity: Activity) -> Number:
    return activity.cost


def calculate_price(product: Product) -> Number:
    """Return the price of a single product, switching on its type."""

    if isinstance(product, Flight):
        return flight_price(product)
    elif isinstance(product, Hotel):
        return hotel_price(product)
    elif isinstance(product, Car):
        return car_price(product)
    elif isinstance(product, Activity):
        return activity_price(product)
    logger.error("Cannot price %r", product)
    raise UnsupportedProductError(product)
