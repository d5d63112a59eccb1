import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean import current_domain
from reviews.api import admin_router, client_router, register_exception_handlers
from reviews.shop.shop import Shop

SHOP_ID = "DGmlZG6trNcllnVSkOQ6"
SHOP_DOMAIN = "avada-second-chance.myshopify.com"
OTHER_SHOP_ID = "Xq7T2mWcPz8LrK4uYbN1"
OTHER_SHOP_DOMAIN = "other-store.myshopify.com"


def add_shop(shop_id, shopify_domain, name=None):
    shop = Shop.register(shopify_domain, name=name, shop_id=shop_id)
    current_domain.repository_for(Shop).add(shop)
    return shop


def build_app():
    app = FastAPI()
    app.include_router(client_router)
    app.include_router(admin_router)
    register_exception_handlers(app)
    return app


@pytest.fixture()
def shop():
    return add_shop(SHOP_ID, SHOP_DOMAIN, name="Avada Second Chance")


@pytest.fixture()
def other_shop():
    return add_shop(OTHER_SHOP_ID, OTHER_SHOP_DOMAIN, name="Other Store")


@pytest.fixture()
def client():
    return TestClient(build_app())
