"""Faker-based data generators for Locust load test scenarios.

Payloads use the camelCase field names the storefront widget sends and pass
the request schema's rules (rate 1..5, names within 100 chars).
"""

import random
import uuid

from faker import Faker

fake = Faker()

DEFAULT_SHOP_DOMAIN = "avada-second-chance.myshopify.com"


def valid_email() -> str:
    local = fake.user_name()[:20]
    domain = fake.free_email_domain()
    return f"{local}.{uuid.uuid4().hex[:4]}@{domain}"


def product_id() -> int:
    """Storefront product ids are large integers, e.g. 10018120892696."""
    return random.randint(10_000_000_000_000, 10_999_999_999_999)


def review_data(rate: int | None = None) -> dict:
    """Generate a storefront review payload, including one widget-only field."""
    return {
        "rate": rate if rate is not None else random.choices([1, 2, 3, 4, 5], weights=[1, 1, 2, 4, 6])[0],
        "title": fake.sentence(nb_words=5)[:255],
        "content": fake.paragraph(nb_sentences=3),
        "firstName": fake.first_name()[:100],
        "lastName": fake.last_name()[:100],
        "email": valid_email(),
        "productId": product_id(),
        "locale": random.choice(["en", "vi", "fr"]),
    }


def invalid_review_data() -> dict:
    """A payload the API must reject with 400."""
    return {"rate": random.choice([0, 6]), "content": fake.sentence()}
