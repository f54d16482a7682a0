"""Integration tests for Identity inside pydantic models and FastAPI routes."""

import pytest
from pydantic import BaseModel, TypeAdapter, ValidationError

from identityref import Identity
from identityref.utils.codec import PATTERN

ENGINEERED_TEXT = "anananananananan"


class Record(BaseModel):
    id: Identity


class TestPydanticModel:
    """Tests for Identity as a model field."""

    def test_validate_from_string(self):
        record = Record(id="ANANANANANANANAN")
        assert isinstance(record.id, Identity)
        assert record.id == ENGINEERED_TEXT

    def test_validate_from_bytes(self):
        assert Record(id=bytes([85] * 10)).id == ENGINEERED_TEXT

    def test_validate_from_identity(self, engineered):
        assert Record(id=engineered).id is engineered

    @pytest.mark.parametrize("value", ["too-short", "anananananan-ilq", "", bytes(3), 42])
    def test_invalid_value(self, value):
        with pytest.raises(ValidationError):
            Record(id=value)

    def test_dump_json(self, engineered):
        assert Record(id=engineered).model_dump_json() == '{"id":"anananananananan"}'

    def test_dump_python_keeps_identity(self, engineered):
        assert Record(id=engineered).model_dump()["id"] is engineered

    def test_validate_json(self):
        record = Record.model_validate_json('{"id": "anananananananan"}')
        assert record.id.to_bytes() == bytes([85] * 10)

    def test_json_schema(self):
        schema = TypeAdapter(Identity).json_schema()
        assert schema == {"type": "string", "minLength": 16, "maxLength": 16, "pattern": PATTERN}


class TestRoutes:
    """Tests for Identity as a FastAPI parameter."""

    async def test_path_parameter(self, client):
        """GET /items/{id} parses the identity case-insensitively."""
        response = await client.get("/items/ANANANANANANANAN")
        assert response.status_code == 200
        assert response.json() == {"id": ENGINEERED_TEXT, "name": "engineered"}

    async def test_path_parameter_bytes(self, client):
        response = await client.get(f"/items/{ENGINEERED_TEXT}/bytes")
        assert response.status_code == 200
        assert response.json()["hex"] == "55" * 10

    async def test_invalid_path_parameter(self, client):
        """Malformed identities are rejected with 422."""
        response = await client.get("/items/anananananan-ilq")
        assert response.status_code == 422

    async def test_request_body(self, client):
        new_id = str(Identity.new())
        response = await client.post("/items", json={"id": new_id.upper(), "name": "fresh"})
        assert response.status_code == 200
        assert response.json() == {"id": new_id, "name": "fresh"}

    async def test_openapi_schema(self, client):
        response = await client.get("/openapi.json")
        assert response.status_code == 200
        parameters = response.json()["paths"]["/items/{item_id}"]["get"]["parameters"]
        assert parameters[0]["schema"]["pattern"] == PATTERN
