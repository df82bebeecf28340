"""API schemas for client requests and responses."""
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python.

    Strings are stripped before length constraints are checked, so "  US " is
    validated as "US".
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)


class ContactDetails(ApiModel):
    """Fields that can be changed after a client is created."""
    email: EmailStr = Field(..., description="Email address is required")
    address: str = Field(..., min_length=1, description="Address cannot be blank")
    phone: str = Field(..., min_length=1, description="Phone cannot be blank")
    country: str = Field(
        ..., min_length=2, max_length=3,
        description="Country code must be 2-3 characters (ISO 3166-1)",
    )

    @field_validator("address", "phone", "country")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure required text fields are not just whitespace."""
        if not v or not v.strip():
            raise ValueError("Field cannot be blank or only whitespace")
        return v.strip()

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class CreateClientRequest(ContactDetails):
    """Request schema for creating a new client. Id and demonym are system generated."""
    first_name: str = Field(..., min_length=1, description="First name cannot be blank")
    middle_name: str | None = None
    last_name: str = Field(..., min_length=1, description="Last name cannot be blank")
    second_last_name: str | None = None

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_name_not_blank(cls, v: str) -> str:
        """Ensure name fields are not just whitespace."""
        if not v or not v.strip():
            raise ValueError("Field cannot be blank or only whitespace")
        return v.strip()

    @field_validator("middle_name", "second_last_name")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()


class UpdateClientRequest(ContactDetails):
    """
    Request schema for updating a client.

    Only contact fields are updatable; name fields sent by the caller are ignored.
    """
    pass


class ClientResponse(ApiModel):
    """Response schema for client data returned by the API."""
    id: UUID
    first_name: str
    middle_name: str | None = None
    last_name: str
    second_last_name: str | None = None
    email: str
    address: str
    phone: str
    country: str
    demonym: str | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""
    message: str
