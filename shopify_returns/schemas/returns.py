from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

Identifier = str | int
Amount = str | int | float


class _ParamsModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def reject_blank_strings(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            raise ValueError("must be a non-empty string")
        return value


class RefundLineItemInput(_ParamsModel):
    lineItemId: Identifier
    quantity: int


class ReturnRefundLineItemInput(_ParamsModel):
    returnLineItemId: Identifier
    quantity: int


class OrderTransactionInput(_ParamsModel):
    transactionId: Identifier
    amount: Amount
    currencyCode: str
