"""Pytest fixtures for all tests."""

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from pydantic import BaseModel

from identityref import Identity
from identityref.internal import logging as identity_logging
from identityref.utils import generator

ENGINEERED_BYTES = bytes([85] * 10)


@pytest.fixture(autouse=True)
def reset_shared_state():
    """Each test starts with a fresh logger and random source."""
    generator._source = None
    identity_logging._logger = None
    yield
    generator._source = None
    identity_logging._logger = None


@pytest.fixture
def engineered():
    """Identity whose bytes are all 0b01010101."""
    return Identity.from_bytes(ENGINEERED_BYTES)


class Item(BaseModel):
    id: Identity
    name: str = ""


def create_app():
    """Small app that uses Identity as a path parameter and model field."""
    app = FastAPI()

    @app.get("/items/{item_id}", response_model=Item)
    async def get_item(item_id: Identity):
        return Item(id=item_id, name="engineered")

    @app.post("/items", response_model=Item)
    async def create_item(item: Item):
        return item

    @app.get("/items/{item_id}/bytes")
    async def get_item_bytes(item_id: Identity):
        return {"id": str(item_id), "hex": item_id.to_bytes().hex()}

    return app


@pytest.fixture
async def app():
    """Create test FastAPI app."""
    return create_app()


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
