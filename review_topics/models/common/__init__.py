"""Common models - base classes."""

from review_topics.models.common.base import BaseEntity

__all__ = [
    "BaseEntity",
]
