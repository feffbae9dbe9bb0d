"""
Booking form schemas collected by the last two wizard steps
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator


class PaymentMethod(str, Enum):
    CREDIT_CARD = "credit_card"
    MOMO = "momo"
    BANK_TRANSFER = "bank_transfer"


class ContactInfo(BaseModel):
    """Traveller contact details for the booking"""
    full_name: str = Field(..., min_length=2)
    email: EmailStr
    phone: str = Field(..., min_length=10)
    address: Optional[str] = None
    special_requests: Optional[str] = None

    @field_validator("full_name", "phone", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip() if isinstance(v, str) else v


class PaymentDetails(BaseModel):
    """
    Payment method and, for cards, the card fields.
    Card details are only validated; nothing is charged or stored.
    """
    method: PaymentMethod
    card_number: Optional[str] = None
    card_holder: Optional[str] = None
    expiry_date: Optional[str] = None
    cvv: Optional[str] = None

    @field_validator("card_number", "cvv", mode="before")
    @classmethod
    def strip_spaces(cls, v):
        return v.replace(" ", "") if isinstance(v, str) else v

    @model_validator(mode="after")
    def check_card(self):
        if self.method != PaymentMethod.CREDIT_CARD:
            return self

        if not self.card_number or not self.card_number.isdigit() or len(self.card_number) < 16:
            raise ValueError("card_number must have at least 16 digits")
        if not self.card_holder or not self.card_holder.strip():
            raise ValueError("card_holder is required")
        if not self.expiry_date or not self.expiry_date.strip():
            raise ValueError("expiry_date is required")
        if not self.cvv or not self.cvv.isdigit() or len(self.cvv) < 3:
            raise ValueError("cvv must have at least 3 digits")
        return self
