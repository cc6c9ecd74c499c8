#!/usr/bin/env python3
"""
Print topic sentiment for a location's reviews.

Usage:
    python run.py                  # List locations
    python run.py "Restaurant A"   # Analyze one location
"""

import sys

from review_topics.container import container
from settings.logging import setup_logging
from web.api.errors import NotFoundError, ValidationError
from web.api.locations import get_location_reviews, get_locations

logger = setup_logging()


def main(args: list[str]) -> int:
    container.init()

    if not args:
        for location in get_locations():
            print(location)
        return 0

    try:
        response = get_location_reviews(args[0])
    except (NotFoundError, ValidationError) as e:
        logger.error(e.message)
        return 1

    print(response.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
