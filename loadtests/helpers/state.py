"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state, with no cross-user sharing.
State tracks review IDs returned by the submission endpoint so follow-up
admin operations can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class ReviewState:
    """Tracks state for a single simulated review lifecycle."""

    review_id: str | None = None
    current_status: str = "disapproved"


@dataclass
class ShopperState:
    """Reviews submitted by one simulated shopper."""

    review_ids: list[str] = field(default_factory=list)
