"""Tests for response envelopes, list options and parameter parsing."""

import pytest
from pydantic import ValidationError

from app.api.v1.params import parse_int, require_id
from app.core.errors import APIError, ErrorType
from app.integrations.squarespace.options import OrderListOptions, ProductListOptions
from app.schemas.common import (
    ErrorDetail,
    ErrorEnvelope,
    Pagination,
    SuccessEnvelope,
    render_envelope,
)
from app.schemas.squarespace import Money


class TestEnvelopes:
    def test_success_without_pagination(self) -> None:
        envelope = SuccessEnvelope[list[str]](data=["a", "b"])

        assert render_envelope(envelope) == {"data": ["a", "b"]}

    def test_success_with_pagination_uses_wire_names(self) -> None:
        envelope = SuccessEnvelope[list[str]](
            data=[], pagination=Pagination(next_page="n", total_results=0)
        )

        assert render_envelope(envelope) == {
            "data": [],
            "pagination": {"nextPage": "n", "totalResults": 0},
        }

    def test_nested_models_serialize_by_alias(self) -> None:
        envelope = SuccessEnvelope[Money](data=Money(value="9.99", currency="EUR"))

        assert render_envelope(envelope) == {"data": {"value": "9.99", "currency": "EUR"}}

    def test_error_envelope_has_no_data(self) -> None:
        envelope = ErrorEnvelope(
            error=ErrorDetail(type=ErrorType.NOT_FOUND, message="Order not found: gone")
        )

        assert render_envelope(envelope) == {
            "error": {"type": "not_found", "message": "Order not found: gone"}
        }

    def test_error_envelope_rejects_missing_error(self) -> None:
        with pytest.raises(ValidationError):
            ErrorEnvelope()  # type: ignore[call-arg]

    def test_success_envelope_requires_data(self) -> None:
        with pytest.raises(ValidationError):
            SuccessEnvelope[int]()  # type: ignore[call-arg]


class TestListOptions:
    def test_empty_options_send_nothing(self) -> None:
        assert ProductListOptions().to_params() == {}
        assert OrderListOptions().to_params() == {}

    def test_zero_is_sent_when_explicit(self) -> None:
        assert ProductListOptions(limit=0, offset=0).to_params() == {"limit": 0, "offset": 0}

    def test_empty_strings_are_omitted(self) -> None:
        assert OrderListOptions(status="", customer_id="").to_params() == {}

    def test_customer_filter_wire_name(self) -> None:
        assert OrderListOptions(customer_id="c-1").to_params() == {"customerId": "c-1"}

    def test_site_id_is_not_a_query_param(self) -> None:
        assert ProductListOptions(site_id="s", category="art").to_params() == {"category": "art"}


class TestParams:
    def test_parse_int(self) -> None:
        assert parse_int(None, "limit") is None
        assert parse_int("25", "limit") == 25
        assert parse_int("3", "offset") == 3
        assert parse_int("-2", "offset") == -2
        assert parse_int("+7", "limit") == 7

    @pytest.mark.parametrize("value", ["", "abc", "1.0", "0x10", "1_000", " 5", "5 ", "\u0663"])
    def test_parse_int_rejects(self, value: str) -> None:
        with pytest.raises(APIError) as exc_info:
            parse_int(value, "offset")

        assert exc_info.value.status_code == 400
        assert exc_info.value.error_type == ErrorType.INVALID_PARAMETER
        assert exc_info.value.message == "Invalid offset parameter"

    def test_require_id(self) -> None:
        assert require_id(" ord-1 ", "Order") == "ord-1"

        with pytest.raises(APIError) as exc_info:
            require_id("  ", "Order")

        assert exc_info.value.error_type == ErrorType.MISSING_PARAMETER
        assert exc_info.value.message == "Order ID is required"
