"""Pydantic DTOs (Data Transfer Objects) for clients and contacts."""

from datetime import date

from pydantic import BaseModel, Field


class ClientCreate(BaseModel):
    """Schema for creating a new client."""

    name: str = Field(..., min_length=1, max_length=200, examples=["Acme Corp"])
    industry: str = ""
    products: str = ""
    account_manager: str | None = Field(None, description="Display name of the account manager")
    onboarding_date: date | None = None
    business_model: str = ""
    tax_id: str | None = None
    address: str = ""
    country: str = ""
    state: str = ""
    city: str = ""
    zip_code: str = ""
    website: str | None = None


class ClientUpdate(BaseModel):
    """Schema for updating a client — all fields optional, omitted fields are kept."""

    name: str | None = Field(None, min_length=1, max_length=200)
    industry: str | None = None
    products: str | None = None
    account_manager: str | None = None
    onboarding_date: date | None = None
    business_model: str | None = None
    tax_id: str | None = None
    address: str | None = None
    country: str | None = None
    state: str | None = None
    city: str | None = None
    zip_code: str | None = None
    website: str | None = None


class ContactInput(BaseModel):
    """Schema for adding or replacing a client contact."""

    first_name: str = Field(..., min_length=1)
    last_name: str = ""
    designation: str = ""
    email: str = ""
    country_code: str = ""
    phone: str = ""
    is_primary: bool = False
