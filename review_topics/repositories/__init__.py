"""Repositories package - data access layer for reviews."""

from review_topics.repositories.base import BaseRepository
from review_topics.repositories.reviews import STATIC_REVIEWS, ReviewRepository

__all__ = [
    "BaseRepository",
    "ReviewRepository",
    "STATIC_REVIEWS",
]
