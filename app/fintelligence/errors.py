"""
HTTP-facing errors for the relay endpoints.

Every error carries the status code and the public message that is
rendered as ``{"error": message}``. Upstream details never reach the
message; they are logged where the error is raised.
"""

from fastapi import status

# Public failure messages, one per endpoint
NO_PDF_UPLOADED = "No PDF file uploaded"
INVALID_API_KEY = "Please enter a valid API key"
NO_TRANSACTION_DATA = "No transaction data provided"
INVALID_ANALYSIS_REQUEST = "Invalid analysis request"
INVALID_REQUEST = "Invalid request"
PDF_TOO_LARGE = "PDF file exceeds the 10 MB upload limit"
BODY_TOO_LARGE = "Request body too large"

PARSE_PDF_FAILED = "Failed to parse PDF. Please try again or enter data manually."
CONNECT_BROKERAGE_FAILED = "Failed to connect to brokerage. Please try again."
PARSE_TRANSACTION_PDF_FAILED = "Failed to parse transaction PDF."
PARSE_TRANSACTIONS_FAILED = "Failed to parse transactions."
GENERATE_ADVICE_FAILED = "Failed to generate financial advice"


class RelayError(Exception):
    """Base class for errors rendered as a JSON error body."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RelayValidationError(RelayError):
    """Raised when required input is missing, empty or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class PayloadTooLargeError(RelayError):
    """Raised when an upload or JSON body exceeds its size limit."""

    status_code = status.HTTP_413_CONTENT_TOO_LARGE


class UpstreamError(RelayError):
    """Raised when PDF extraction or the completion call fails."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
