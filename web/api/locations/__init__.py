"""Location reviews API."""

from web.api.locations.views import get_location_reviews, get_locations

__all__ = [
    "get_location_reviews",
    "get_locations",
]
