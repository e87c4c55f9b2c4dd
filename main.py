"""Simple CLI entry to print the sample vacation package."""

import argparse
import logging
from typing import List, Optional

from vacation_package import build_sample_package, get_settings, render_report
from vacation_package.config import DISPATCH_STRATEGIES


logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Print the itinerary and total price of the sample vacation package.")
    parser.add_argument(
        "--dispatch",
        choices=DISPATCH_STRATEGIES,
        help="How products are dispatched (defaults to VACATION_DISPATCH, else 'visitor')",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    package = build_sample_package(args.dispatch or settings.dispatch)
    logger.info("Rendering %s product(s) via %s dispatch", len(package), package.dispatch)
    print(render_report(package))


if __name__ == "__main__":
    main()
