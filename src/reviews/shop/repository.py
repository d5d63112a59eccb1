"""Repository for the Shop aggregate."""

from reviews.domain import reviews
from reviews.shop.shop import Shop


@reviews.repository(part_of=Shop)
class ShopRepository:
    def find_by_domain(self, shopify_domain: str) -> Shop | None:
        """Return the shop registered under ``shopify_domain``, or None.

        Domains are unique by contract; should duplicates exist anyway, the
        first record the store hands back is used.
        """
        if not shopify_domain:
            return None
        return self._dao.query.filter(shopify_domain=shopify_domain).limit(1).all().first
