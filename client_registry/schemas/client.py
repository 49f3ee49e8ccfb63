"""
Client Schemas.

Pydantic schemas for client request decoding and responses.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import from_json

from client_registry.core.exceptions import BadRequestError


class ClientBase(BaseModel):
    """Fields shared by client payloads and stored clients."""

    name: str = Field(
        default="",
        description="Client name",
        examples=["Ana"],
    )
    birth_date: str = Field(
        default="",
        description="Birth date, free-form text",
        examples=["02/02/1991"],
    )
    address: str = Field(
        default="",
        description="Postal address",
        examples=["Rua A"],
    )
    phone: str = Field(
        default="",
        description="Phone number",
        examples=["111"],
    )

    @field_validator("name", "birth_date", "address", "phone", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        # JSON null leaves the field empty, like an omitted key
        return "" if value is None else value


class ClientPayload(ClientBase):
    """
    Schema for the body of create and replace requests.

    Unknown keys, including any client-supplied ``id``, are ignored.
    Omitted or null fields default to the empty string.
    """

    model_config = ConfigDict(extra="ignore")


class ClientIdentity(BaseModel):
    """Server-assigned identity of a stored client."""

    id: str = Field(description="Server-assigned client identifier")


class Client(ClientBase, ClientIdentity):
    """
    A stored client record.

    ``ClientIdentity`` sits last in the bases so ``id`` is the first field
    and leads every serialized record.
    """

    model_config = ConfigDict(frozen=True)


def parse_client_payload(raw: bytes) -> ClientPayload:
    """
    Decode a raw request body into a client payload.

    Invalid UTF-8 sequences are replaced with U+FFFD rather than rejected,
    and a bare ``null`` body decodes to an all-empty payload.

    Args:
        raw: Request body bytes

    Returns:
        Decoded payload

    Raises:
        BadRequestError: If the body is not valid JSON, is not an object,
            or carries a field with a non-string, non-null value
    """
    try:
        data = from_json(raw.decode("utf-8", errors="replace"))
    except ValueError as e:
        raise BadRequestError() from e

    if data is None:
        return ClientPayload()

    try:
        return ClientPayload.model_validate(data)
    except PydanticValidationError as e:
        raise BadRequestError() from e
