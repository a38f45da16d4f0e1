"""
Edge filter schema.

Defines the per-query predicate that decides which legs a search may use.
"""

from dataclasses import dataclass
from typing import Optional

from src.flight_paths.schemas.route import RouteRecord


@dataclass(frozen=True)
class EdgeFilter:
    """
    Immutable, stateless leg predicate.

    Depends only on the leg and its own configuration, never on search
    progress, so one instance can be shared by both searches.

    Attributes:
        required_property: When set, only legs carrying this property are
            traversable. When None, every leg is.
    """

    required_property: Optional[str] = None

    @classmethod
    def create(cls, required_property: Optional[str] = None) -> "EdgeFilter":
        """Factory that treats an empty string as "no requirement"."""
        return cls(required_property=required_property or None)

    def allow(self, record: RouteRecord) -> bool:
        if self.required_property is None:
            return True
        return record.has_property(self.required_property)

    @property
    def is_active(self) -> bool:
        return self.required_property is not None


# Shared instance for unfiltered searches
ALLOW_ALL = EdgeFilter()
