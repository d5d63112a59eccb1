"""Shop aggregate: a storefront tenant that reviews are attached to.

Shops are created by the platform install flow and are only read by the
review flows. The public ``shopify_domain`` is unique and is how storefront
requests identify which shop they belong to.
"""

import re
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from reviews.domain import reviews

_DOMAIN_PATTERN = re.compile(r"^[a-z0-9]([a-z0-9-]*[a-z0-9])?(\.[a-z0-9]([a-z0-9-]*[a-z0-9])?)+$", re.IGNORECASE)


@reviews.aggregate
class Shop:
    shopify_domain = String(required=True, max_length=255, unique=True)
    name = String(max_length=255)
    email = String(max_length=254)
    created_at = DateTime()

    @invariant.post
    def domain_must_be_a_hostname(self):
        if self.shopify_domain is not None and not _DOMAIN_PATTERN.match(self.shopify_domain):
            raise ValidationError({"shopify_domain": [f"'{self.shopify_domain}' is not a valid shop domain"]})

    @classmethod
    def register(cls, shopify_domain, name=None, email=None, shop_id=None):
        """Build a shop record. ``shop_id`` pins the identifier when importing existing shops."""
        attrs = dict(
            shopify_domain=shopify_domain,
            name=name,
            email=email,
            created_at=datetime.now(UTC),
        )
        if shop_id is not None:
            attrs["id"] = shop_id
        return cls(**attrs)
