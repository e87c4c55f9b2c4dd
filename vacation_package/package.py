"""Vacation package: an ordered collection of products."""

from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

from .config import DISPATCH_STRATEGIES
from .itinerary import ITINERARY_HEADER, SECTION_SEPARATOR, get_itinerary
from .models import Number, Product, UnsupportedProductError
from .pricing import calculate_price
from .utils import format_amount
from .visitors import ItineraryVisitor, PricingVisitor, ProductVisitor


logger = logging.getLogger(__name__)

REPORT_DIVIDER = "-" * 52


class VacationPackage:
    """Holds products in insertion order and derives price and itinerary.

    ``dispatch`` selects how each product is handled: ``"switch"`` calls the
    type-switching functions, ``"visitor"`` runs a fresh visitor over the
    products through their ``accept`` method. Both give identical results.
    """

    def __init__(self, dispatch: str = "visitor") -> None:
        if dispatch not in DISPATCH_STRATEGIES:
            raise ValueError(f"Unknown dispatch strategy: {dispatch!r}")
        self.dispatch = dispatch
        self._products: List[Product] = []

    @property
    def products(self) -> Tuple[Product, ...]:
        return tuple(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def add(self, product: Product) -> None:
        logger.debug("Adding %s to package", type(product).__name__)
        self._products.append(product)

    def calculate_price(self) -> Number:
        logger.debug("Pricing %s product(s) via %s", len(self._products), self.dispatch)
        if self.dispatch == "switch":
            total: Number = 0
            for product in self._products:
                total += calculate_price(product)
            return total
        visitor = PricingVisitor()
        self._visit_all(visitor)
        return visitor.price

    def get_itinerary(self) -> str:
        logger.debug("Building itinerary for %s product(s) via %s", len(self._products), self.dispatch)
        if self.dispatch == "switch":
            itinerary = ITINERARY_HEADER
            for product in self._products:
                itinerary += SECTION_SEPARATOR + get_itinerary(product)
            return itinerary
        visitor = ItineraryVisitor()
        self._visit_all(visitor)
        return visitor.itinerary

    def _visit_all(self, visitor: ProductVisitor) -> None:
        for product in self._products:
            accept = getattr(product, "accept", None)
            if accept is None:
                logger.error("Cannot visit %r", product)
                raise UnsupportedProductError(product)
            accept(visitor)


def render_report(package: VacationPackage) -> str:
    """Return the console report: itinerary, then the framed total price."""

    lines = [
        package.get_itinerary(),
        "",
        REPORT_DIVIDER,
        f"Total price: {format_amount(package.calculate_price())}",
        REPORT_DIVIDER,
    ]
    return "\n".join(lines)
