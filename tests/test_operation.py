"""
Tests for the operation entry point.
"""

import uuid
from unittest.mock import patch

import pytest

from gql_automock import (
    AutoMockError,
    ConfigError,
    MockConfig,
    MockDataGenerator,
    OperationKind,
    OperationNotFoundError,
    OperationTypeNotFoundError,
    ReturnTypeNotFoundError,
    SchemaParseError,
    mock_operation,
)
from gql_automock.mock.operation import LIST_RESULT_LENGTH, is_list_signature, strip_wrappers


class TestListResults:
    """Test list-returning operations."""

    def test_widgets_list(self, widgets_schema):
        result = mock_operation(widgets_schema, "Query", "getWidgets")

        assert isinstance(result, list)
        assert len(result) == 5 == LIST_RESULT_LENGTH
        for widget in result:
            assert set(widget) == {"id", "name"}
            assert str(uuid.UUID(widget["id"])) == widget["id"]
            assert isinstance(widget["name"], str) and widget["name"]

    def test_objects_are_independent(self, widgets_schema):
        result = mock_operation(widgets_schema, "Query", "getWidgets")
        assert len({widget["id"] for widget in result}) == 5

    def test_nullable_list(self, portfolio_schema):
        result = mock_operation(portfolio_schema, "Query", "listPortfolios")
        assert isinstance(result, list)
        assert len(result) == 5


class TestSingleResults:
    """Test object-returning operations."""

    def test_single_widget(self, widgets_schema):
        result = mock_operation(widgets_schema, "Query", "getWidget")

        assert isinstance(result, dict)
        assert set(result) == {"id", "name"}

    def test_non_null_object(self, portfolio_schema):
        result = mock_operation(portfolio_schema, OperationKind.MUTATION, "createPortfolio")
        assert isinstance(result, dict)

    def test_subscription(self, portfolio_schema):
        result = mock_operation(portfolio_schema, "Subscription", "holdingUpdated")
        assert set(result) == {"symbol", "price"}
        assert 0 <= result["price"] <= 10000

    def test_portfolio_fields(self, portfolio_schema):
        result = mock_operation(
            portfolio_schema, "Query", "getPortfolio", generator=MockDataGenerator(seed=5)
        )

        assert "@" in result["ownerEmail"]
        assert result["createdDate"].endswith("Z")
        assert 0 <= result["totalAmount"] <= 10000
        # Nested object, enum and wrapped scalar fields are not synthesized
        assert result["holdings"] is None
        assert result["currency"] is None
        assert result["id"]


class TestConfig:
    """Test config handling at the entry point."""

    def test_plain_dict_config(self, widgets_schema):
        config = {"types": {"Widget": {"fields": {"name": {"value": "Sprocket"}}}}}

        result = mock_operation(widgets_schema, "Query", "getWidgets", config)
        assert [widget["name"] for widget in result] == ["Sprocket"] * 5

    def test_model_config(self, portfolio_schema):
        config = MockConfig.coerce(
            {"types": {"Portfolio": {"fields": {"totalAmount": {"min": 5, "max": 5}}}}}
        )

        result = mock_operation(portfolio_schema, "Query", "getPortfolio", config)
        assert result["totalAmount"] == 5

    def test_producer_called_once_per_object(self, widgets_schema):
        calls = []
        config = {"types": {"Widget": {"fields": {"id": {"value": lambda: calls.append(1) or "w"}}}}}

        mock_operation(widgets_schema, "Query", "getWidgets", config)
        assert len(calls) == 5

    def test_invalid_plain_config(self, widgets_schema):
        config = {"types": {"Widget": {"fields": {"name": {"arrayMin": 1.5}}}}}

        with pytest.raises(ConfigError, match="Invalid mock config"):
            mock_operation(widgets_schema, "Query", "getWidgets", config)

    def test_seeded_generator_reproducible(self, widgets_schema):
        first = mock_operation(
            widgets_schema, "Query", "getWidgets", generator=MockDataGenerator(seed=11)
        )
        second = mock_operation(
            widgets_schema, "Query", "getWidgets", generator=MockDataGenerator(seed=11)
        )
        assert first == second


class TestErrors:
    """Test resolution failures."""

    def test_missing_operation(self, widgets_schema):
        with pytest.raises(OperationNotFoundError) as exc_info:
            mock_operation(widgets_schema, "Query", "missingOp")

        assert str(exc_info.value) == "Operation missingOp not found in Query"
        assert exc_info.value.operation_name == "missingOp"

    def test_missing_root_type(self, widgets_schema):
        with pytest.raises(OperationTypeNotFoundError) as exc_info:
            mock_operation(widgets_schema, "Mutation", "createWidget")

        assert str(exc_info.value) == "Operation type Mutation not found"

    def test_scalar_return_type(self, portfolio_schema):
        with pytest.raises(ReturnTypeNotFoundError) as exc_info:
            mock_operation(portfolio_schema, "Query", "holdingCount")

        assert exc_info.value.return_type == "Int"

    def test_enum_list_return_type(self, portfolio_schema):
        with pytest.raises(ReturnTypeNotFoundError) as exc_info:
            mock_operation(portfolio_schema, "Query", "currencies")

        assert str(exc_info.value) == "Return type [Currency!]! not found"

    def test_union_return_type(self, portfolio_schema):
        with pytest.raises(ReturnTypeNotFoundError):
            mock_operation(portfolio_schema, "Query", "search")

    def test_parse_error(self):
        with pytest.raises(SchemaParseError):
            mock_operation("type Query {", "Query", "anything")

    def test_errors_share_base(self, widgets_schema):
        with pytest.raises(AutoMockError):
            mock_operation(widgets_schema, "Query", "missingOp")

    def test_invalid_kind(self, widgets_schema):
        with pytest.raises(ValueError):
            mock_operation(widgets_schema, "query", "getWidgets")

    def test_no_generation_on_failure(self, widgets_schema):
        """Nothing is synthesized when resolution fails."""
        generator = MockDataGenerator(seed=1)
        with patch.object(generator, "generate_object") as generate:
            with pytest.raises(OperationNotFoundError):
                mock_operation(widgets_schema, "Query", "missingOp", generator=generator)

        generate.assert_not_called()


class TestSignatureHelpers:
    """Test wrapper handling."""

    @pytest.mark.parametrize(
        "signature,expected",
        [
            ("Widget", "Widget"),
            ("Widget!", "Widget"),
            ("[Widget]", "Widget"),
            ("[Widget!]!", "Widget"),
            ("[[Widget]]", "Widget"),
        ],
    )
    def test_strip_wrappers(self, signature, expected):
        assert strip_wrappers(signature) == expected

    def test_is_list_signature(self):
        assert is_list_signature("[Widget]")
        assert is_list_signature("  [Widget!]!")
        assert not is_list_signature("Widget!")
