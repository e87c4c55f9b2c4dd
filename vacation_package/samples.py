"""Sample vacation package used by the command-line entry point."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from .config import get_settings
from .models import Activity, Car, Flight, Hotel
from .package import VacationPackage

SAMPLE_START = datetime(2019, 12, 30)
SAMPLE_END = datetime(2020, 1, 1)


def build_sample_package(dispatch: Optional[str] = None) -> VacationPackage:
    """Return a New York long weekend: two flights, a hotel, a car and a show."""

    package = VacationPackage(dispatch=dispatch or get_settings().dispatch)
    package.add(Flight("TV 312", "BOS", "JFK", SAMPLE_START, 300))
    package.add(Flight("TV 313", "JFK", "BOS", SAMPLE_END, 300))
    package.add(Hotel("Hilton Times Square", SAMPLE_START, SAMPLE_END, 400))
    package.add(Car("SUV", SAMPLE_START, SAMPLE_END, 150))
    package.add(Activity("Hamilton", SAMPLE_START, 200))
    return package
