"""Vacation package pricing and itineraries with two dispatch styles."""

from .config import Settings, get_settings
from .itinerary import get_itinerary
from .models import Activity, Car, Flight, Hotel, Product, UnsupportedProductError
from .package import VacationPackage, render_report
from .pricing import calculate_price
from .samples import build_sample_package
from .visitors import ItineraryVisitor, PricingVisitor, ProductVisitor

__all__ = [
    "Activity",
    "Car",
    "Flight",
    "Hotel",
    "ItineraryVisitor",
    "PricingVisitor",
    "Product",
    "ProductVisitor",
    "Settings",
    "UnsupportedProductError",
    "VacationPackage",
    "build_sample_package",
    "calculate_price",
    "get_itinerary",
    "get_settings",
    "render_report",
]
