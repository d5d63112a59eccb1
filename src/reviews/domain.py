"""Product Reviews bounded context.

Resolves storefront shops by their public domain, stores customer reviews
against them, and lets shop staff publish or unpublish those reviews.
"""

from protean.domain import Domain

from reviews.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
reviews = Domain(name="reviews")
