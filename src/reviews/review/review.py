"""Review aggregate: a shopper's review of a product in one shop.

Reviews are written once at submission and afterwards only change their
moderation status. A review carries the shop it was submitted to
(``shop_id`` and ``shop_domain`` are copied from the shop at write time)
plus whatever the storefront widget sent: the known fields are typed, the
rest is kept verbatim in ``extra``.

Moderation:
    disapproved (default) <-> approved
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Dict, Identifier, Integer, String, Text

from reviews.domain import reviews
from reviews.review.events import ReviewStatusChanged, ReviewSubmitted


class ReviewStatus(Enum):
    APPROVED = "approved"
    DISAPPROVED = "disapproved"


DEFAULT_STATUS = ReviewStatus.DISAPPROVED
DEFAULT_NOTIFICATION_CHANNEL = "email"

# Fields owned by the system. Extra keys that name one of them, in any mix of
# case and underscores (shop_id, shopId, shopID), are dropped at submission.
SYSTEM_FIELDS = frozenset(
    {
        "id",
        "shop_id",
        "shop_domain",
        "status",
        "skip_content_check",
        "notification_channel",
        "created_at",
        "updated_at",
    }
)

_SYSTEM_KEYS = frozenset(name.replace("_", "") for name in SYSTEM_FIELDS)


def _is_system_key(key) -> bool:
    return str(key).replace("_", "").lower() in _SYSTEM_KEYS


def strip_system_fields(extra):
    """Return ``extra`` without keys that would shadow system fields."""
    if not extra:
        return {}
    return {key: value for key, value in extra.items() if not _is_system_key(key)}


@reviews.aggregate
class Review:
    # Shop linkage, denormalized at submission
    shop_id = Identifier(required=True)
    shop_domain = String(required=True, max_length=255)

    # Submitted content
    product_id = String(max_length=64)
    rate = Integer(required=True, min_value=1, max_value=5)
    title = String(max_length=255)
    content = Text()
    first_name = String(max_length=100)
    last_name = String(max_length=100)
    email = String(max_length=254)
    helpful = Integer(default=0, min_value=0)
    extra = Dict()

    # Moderation and fixed flags
    status = String(choices=ReviewStatus, default=DEFAULT_STATUS.value)
    skip_content_check = Boolean(default=True)
    notification_channel = String(max_length=20, default=DEFAULT_NOTIFICATION_CHANNEL)

    # Timestamps
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def extra_cannot_shadow_system_fields(self):
        clashes = sorted(key for key in (self.extra or {}) if _is_system_key(key))
        if clashes:
            raise ValidationError({"extra": [f"Reserved field names: {', '.join(clashes)}"]})

    @property
    def is_published(self) -> bool:
        return self.status == ReviewStatus.APPROVED.value

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def submit(
        cls,
        shop_id,
        shop_domain,
        rate,
        content=None,
        title=None,
        first_name=None,
        last_name=None,
        email=None,
        product_id=None,
        helpful=0,
        extra=None,
    ):
        """Create a new review for the given shop with default moderation state."""
        now = datetime.now(UTC)

        review = cls(
            shop_id=shop_id,
            shop_domain=shop_domain,
            product_id=str(product_id) if product_id is not None else None,
            rate=rate,
            title=title,
            content=content,
            first_name=first_name,
            last_name=last_name,
            email=email,
            helpful=helpful or 0,
            extra=strip_system_fields(extra),
            status=DEFAULT_STATUS.value,
            skip_content_check=True,
            notification_channel=DEFAULT_NOTIFICATION_CHANNEL,
            created_at=now,
            updated_at=now,
        )

        review.raise_(
            ReviewSubmitted(
                review_id=str(review.id),
                shop_id=str(shop_id),
                shop_domain=shop_domain,
                product_id=review.product_id,
                rate=review.rate,
                status=review.status,
                submitted_at=now,
            )
        )

        return review

    # -------------------------------------------------------------------
    # Moderation
    # -------------------------------------------------------------------
    def set_status(self, status):
        """Move the review to ``status``. Setting the current status is a no-op."""
        try:
            target = ReviewStatus(status)
        except ValueError:
            allowed = ", ".join(s.value for s in ReviewStatus)
            raise ValidationError({"status": [f"Unknown status '{status}', expected one of: {allowed}"]}) from None

        previous = self.status
        if previous == target.value:
            return

        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            ReviewStatusChanged(
                review_id=str(self.id),
                shop_id=str(self.shop_id),
                rate=self.rate,
                previous_status=previous,
                status=target.value,
                changed_at=now,
            )
        )

    def publish(self):
        self.set_status(ReviewStatus.APPROVED)

    def unpublish(self):
        self.set_status(ReviewStatus.DISAPPROVED)
