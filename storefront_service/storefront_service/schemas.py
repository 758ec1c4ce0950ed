"""Pydantic models for storefront request and response payloads."""

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# Upstream products are passed through untouched; their fields vary by provider.
Product = dict[str, Any]


class PurchaseRequest(BaseModel):
    """Body of a purchase submission.

    Both fields are optional at the parsing level so that a missing field is
    reported by the purchase recorder rather than by the request parser.

    Attributes:
        customer (str | None): Customer name, sent as ``cliente`` (or ``customer``).
            Must be text; numbers and other JSON types fail parsing with 400.
        items (Any): Selected products, sent as ``produtos`` (or ``items``).
    """

    customer: Optional[str] = Field(None, validation_alias=AliasChoices("cliente", "customer"))
    items: Optional[Any] = Field(None, validation_alias=AliasChoices("produtos", "items"))

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "cliente": "Ana",
                "produtos": [{"id": "1", "nome": "Rustic Metal Fish", "preco": "289.00"}],
            }
        }
    )


class PurchaseRecord(BaseModel):
    """A stored purchase with its items decoded back from JSON.

    Attributes:
        id (int): Identifier assigned by the store.
        customer (str): Customer name.
        items (Any): The submitted product list.
    """

    id: int
    customer: str
    items: Any


class MessageResponse(BaseModel):
    """Confirmation body returned on success."""

    message: str


class ErrorResponse(BaseModel):
    """Error body returned on failure."""

    error: str
