"""Unit tests for date parsing, error translation and log masking helpers."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from app.middleware.axiom_logging import mask_sensitive, resolve_resource
from app.utils.dates import parse_date
from app.utils.exceptions import BadRequestError, NotFoundError, bad_request_on_error


class TestParseDate:

    def test_valid(self):
        assert parse_date("2024-03-15") == date(2024, 3, 15)

    def test_surrounding_whitespace(self):
        assert parse_date(" 2024-03-15 ") == date(2024, 3, 15)

    @pytest.mark.parametrize("value", ["", "   ", "15-03-2024", "2024/03/15", "2024-13-01", "2023-02-29", "yesterday"])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_date(value)


class TestBadRequestOnError:

    async def test_passes_through_on_success(self):
        db = AsyncMock()
        async with bad_request_on_error(db, "Error saving thing"):
            pass
        db.rollback.assert_not_awaited()

    async def test_translates_http_exception(self):
        db = AsyncMock()
        with pytest.raises(BadRequestError) as exc_info:
            async with bad_request_on_error(db, "Error deleting thing"):
                raise NotFoundError("Thing with id 3 not found")
        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Error deleting thing: Thing with id 3 not found"
        db.rollback.assert_awaited_once()

    async def test_translates_plain_exception(self):
        db = AsyncMock()
        with pytest.raises(BadRequestError) as exc_info:
            async with bad_request_on_error(db, "Error updating thing"):
                raise RuntimeError("connection lost")
        assert exc_info.value.detail == "Error updating thing: connection lost"


class TestMaskSensitive:

    def test_masks_nested_secrets(self):
        masked = mask_sensitive({"username": "bob", "password": "pw", "nested": {"refresh_token": "t"}})
        assert masked == {"username": "bob", "password": "***", "nested": {"refresh_token": "***"}}

    def test_leaves_plain_values(self):
        assert mask_sensitive([1, "a"]) == [1, "a"]


class TestResolveResource:

    def test_admin_resource(self):
        assert resolve_resource("/api/v1/admin/license-history/license/3") == ("admin", "license-history")

    def test_auth_endpoint(self):
        assert resolve_resource("/api/v1/auth/login") == ("auth", "login")
