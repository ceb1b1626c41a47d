# app/models/errors.py

from pydantic import BaseModel, ConfigDict, Field


class ErrorOut(BaseModel):
    """Uniform error body returned for every failed request."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    status_code: int = Field(alias="status code")
    reason: str
    uri: str
    timestamp: str
