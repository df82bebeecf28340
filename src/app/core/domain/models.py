"""Domain models used in business logic."""
import uuid
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator


class Client(BaseModel):
    """Domain model for Client used in business logic."""
    id: UUID = Field(default_factory=uuid.uuid4, description="Unique client ID")
    first_name: str = Field(..., min_length=1, description="First name cannot be blank")
    middle_name: str | None = None
    last_name: str = Field(..., min_length=1, description="Last name cannot be blank")
    second_last_name: str | None = None
    email: EmailStr = Field(..., description="Email address, stored lower-cased")
    address: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    country: str = Field(..., min_length=2, max_length=3, description="ISO 3166-1 alpha-2 or alpha-3 code")
    demonym: str | None = Field(default=None, description="Resolved from the country code, never user supplied")

    model_config = {"from_attributes": True, "validate_assignment": True}

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()

    def update_contact(self, email: str, address: str, phone: str, country: str) -> None:
        """Overwrite the mutable contact fields. Identity and names are left untouched."""
        self.email = email
        self.address = address
        self.phone = phone
        self.country = country

    def enrich(self, demonym: str | None) -> None:
        """Set the demonym; a missing lookup result keeps the previous value."""
        if demonym:
            self.demonym = demonym
