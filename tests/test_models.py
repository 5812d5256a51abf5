"""Tests for Pydantic request models."""

import pytest
from pydantic import ValidationError

from app.fintelligence.models import (
    AnalyzeRequest,
    BrokerageConnectRequest,
    Portfolio,
    TransactionTextRequest,
)


class TestBrokerageConnectRequest:
    """Tests for BrokerageConnectRequest model."""

    def test_accepts_camel_case_alias(self):
        request = BrokerageConnectRequest.model_validate({"apiKey": "abcd1234"})
        assert request.api_key == "abcd1234"

    def test_key_suffix_is_last_four(self):
        request = BrokerageConnectRequest(api_key="abcd1234")
        assert request.key_suffix == "1234"

    def test_surrounding_whitespace_stripped(self):
        request = BrokerageConnectRequest(api_key="  wxyz9876  ")
        assert request.key_suffix == "9876"

    @pytest.mark.parametrize("key", ["", "ab", "abc", "  ab  "])
    def test_short_key_rejected(self, key: str):
        with pytest.raises(ValidationError):
            BrokerageConnectRequest(api_key=key)

    def test_exactly_four_characters_accepted(self):
        assert BrokerageConnectRequest(api_key="abcd").key_suffix == "abcd"

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError):
            BrokerageConnectRequest.model_validate({"apiKey": 12345678})


class TestTransactionTextRequest:
    def test_text_kept_verbatim(self):
        request = TransactionTextRequest(text="  01/02 Lunch 12.00\n")
        assert request.text == "  01/02 Lunch 12.00\n"

    @pytest.mark.parametrize("text", ["", " ", "\n\t "])
    def test_blank_text_rejected(self, text: str):
        with pytest.raises(ValidationError):
            TransactionTextRequest(text=text)


class TestPortfolio:
    """Tests for the two accepted portfolio shapes."""

    def test_simple_shape(self):
        portfolio = Portfolio.model_validate({"value": 500, "risk": "low"})
        assert portfolio.value == 500
        assert portfolio.has_holdings is False

    def test_detailed_shape(self):
        portfolio = Portfolio.model_validate(
            {
                "accountValue": 1000,
                "cashBalance": 100,
                "risk": "moderate",
                "holdings": [
                    {"symbol": "VTI", "name": "Vanguard Total", "currentPrice": 250}
                ],
            }
        )
        assert portfolio.has_holdings is True
        assert portfolio.account_value == 1000
        assert portfolio.holdings[0].current_price == 250

    def test_neither_shape_rejected(self):
        with pytest.raises(ValidationError):
            Portfolio.model_validate({"risk": "low"})

    def test_extra_fields_allowed(self):
        portfolio = Portfolio.model_validate(
            {"value": 1, "risk": "low", "accountName": "Demo"}
        )
        assert portfolio.value == 1


class TestAnalyzeRequest:
    def test_transactions_optional(self):
        request = AnalyzeRequest.model_validate(
            {"finances": {"checking": 1}, "portfolio": {"value": 1}, "news": []}
        )
        assert request.transactions is None

    def test_finances_is_free_form(self):
        request = AnalyzeRequest.model_validate(
            {
                "finances": {"accounts": [{"name": "joint", "balance": 3}]},
                "portfolio": {"value": 1},
                "news": ["x"],
            }
        )
        assert request.finances["accounts"][0]["balance"] == 3

    def test_news_must_be_list_of_strings(self):
        with pytest.raises(ValidationError):
            AnalyzeRequest.model_validate(
                {"finances": {}, "portfolio": {"value": 1}, "news": "headline"}
            )

    def test_missing_portfolio_rejected(self):
        with pytest.raises(ValidationError):
            AnalyzeRequest.model_validate({"finances": {}, "news": []})
