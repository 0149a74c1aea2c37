"""Request bodies for the web API."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from ..models.training import ACTIVITY_OPTIONS, parse_session_date


class CustomerIn(BaseModel):
    """Customer fields submitted by the customer form."""

    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    address: str = ""
    city: str = ""


class TrainingIn(BaseModel):
    """Training session fields submitted by the training form."""

    date: datetime
    activity: str = Field(
        min_length=1,
        description=f"Suggested values: {', '.join(ACTIVITY_OPTIONS)}",
    )
    duration: int = Field(30, gt=0, description="Minutes")
    customer_id: str = Field(min_length=1)

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        if isinstance(value, (str, datetime)):
            return parse_session_date(value)
        return value
