"""Review repository - static, location-indexed reviews."""

from collections.abc import Iterable

from review_topics.models.reviews import Review
from review_topics.repositories.base import BaseRepository

STATIC_REVIEWS = (
    Review(id=1, location="Restaurant A", text="Great experience! Friendly staff and excellent service."),
    Review(id=2, location="Restaurant B", text="Not satisfied with the quality. The product was damaged."),
    Review(id=3, location="Cafe X", text="Highly recommended. Will definitely visit again."),
)


class ReviewRepository(BaseRepository):
    """Repository for review data access."""

    def __init__(self, reviews: Iterable[Review] = STATIC_REVIEWS):
        super().__init__()
        self._reviews = tuple(reviews)

    def get_reviews(self, location: str) -> list[Review]:
        """Get reviews left for a location (exact name match)."""

        def fetch():
            return [r for r in self._reviews if r.location == location]

        return self._cached(f"reviews_{location}", fetch)

    def get_locations(self) -> list[str]:
        """Get all locations with at least one review, in first-seen order."""
        return self._cached("locations", lambda: list(dict.fromkeys(r.location for r in self._reviews)))
