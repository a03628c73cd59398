from typing import Optional


class DlmmHttpError(Exception):
    """Transport, HTTP status or JSON decoding failure talking to an upstream."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class DlmmSdkError(Exception):
    """The SDK bridge answered, but not with what the operation needs."""
