# app/errors.py
"""
Domain errors for the jeep catalog.

Raised by the query handler and the record mapper; translated into
HTTP responses by app.api.errors.
"""

from typing import Optional


class JeepSalesError(Exception):
    """Base error for the catalog."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class JeepNotFoundError(JeepSalesError):
    """No catalog row matched the requested model and trim."""

    def __init__(self, model: Optional[str], trim: Optional[str]) -> None:
        super().__init__(f"No Jeeps found with model={model} and trim={trim}")
        self.model = model
        self.trim = trim


class JeepMappingError(JeepSalesError):
    """A stored row could not be converted into a Jeep record."""

    def __init__(self, model_pk, reason: str) -> None:
        super().__init__(f"Cannot map row model_pk={model_pk}: {reason}")
        self.model_pk = model_pk
        self.reason = reason
