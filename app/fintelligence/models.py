"""
Pydantic models for the relay endpoints.

Request bodies are validated against these shapes before any prompt is
built. Field names are snake_case; the camelCase names used by the web
client are accepted as aliases.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Amounts arrive as numbers from the model output and sometimes as
# formatted strings ("$1,234.50") when a user edits them by hand.
Amount = int | float | str | None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="healthy", description="Service health status")
    message: str = Field(default="", description="Status message")
    version: str = Field(default="1.0.0", description="API version")


class ErrorResponse(BaseModel):
    """Body of every failed request."""

    error: str


class BrokerageConnectRequest(BaseModel):
    """Body of POST /api/connect-brokerage."""

    model_config = ConfigDict(populate_by_name=True)

    api_key: str = Field(..., alias="apiKey")

    @field_validator("api_key")
    @classmethod
    def validate_key_length(cls, v: str) -> str:
        """Require at least four non-blank characters and strip padding."""
        v = v.strip()
        if len(v) < 4:
            raise ValueError("API key must be at least 4 characters")
        return v

    @property
    def key_suffix(self) -> str:
        """The last four characters, the only part ever sent upstream."""
        return self.api_key[-4:]


class TransactionTextRequest(BaseModel):
    """Body of POST /api/parse-transactions."""

    text: str

    @field_validator("text")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Transaction text must not be empty")
        return v


class Holding(BaseModel):
    """One position of a (simulated) brokerage portfolio."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    symbol: str | None = None
    name: str | None = None
    shares: Amount = None
    avg_cost: Amount = Field(default=None, alias="avgCost")
    current_price: Amount = Field(default=None, alias="currentPrice")
    market_value: Amount = Field(default=None, alias="marketValue")
    gain_loss: Amount = Field(default=None, alias="gainLoss")
    gain_loss_percent: Amount = Field(default=None, alias="gainLossPercent")


class Portfolio(BaseModel):
    """
    Portfolio snapshot supplied to the advisor.

    Two shapes are accepted:
    - detailed: ``holdings`` + ``accountValue`` + ``cashBalance`` + ``risk``
    - simple: ``value`` + ``risk``
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    holdings: list[Holding] = Field(default_factory=list)
    account_value: Amount = Field(default=None, alias="accountValue")
    cash_balance: Amount = Field(default=None, alias="cashBalance")
    value: Amount = None
    risk: str | None = None

    @model_validator(mode="after")
    def validate_shape(self) -> "Portfolio":
        """Reject a portfolio that matches neither accepted shape."""
        if not self.holdings and self.value is None:
            raise ValueError("Portfolio needs either holdings or a value")
        return self

    @property
    def has_holdings(self) -> bool:
        return bool(self.holdings)


class TransactionRecord(BaseModel):
    """A transaction as returned by the parsing endpoints."""

    model_config = ConfigDict(extra="allow")

    date: str | None = None
    description: str | None = None
    amount: Amount = None
    type: str | None = None
    category: str | None = None


class AnalyzeRequest(BaseModel):
    """Body of POST /api/analyze."""

    finances: Any
    portfolio: Portfolio
    news: list[str]
    transactions: list[TransactionRecord] | None = None


class AdviceResponse(BaseModel):
    """Markdown advice produced by the model."""

    advice: str
