"""Merchant-pay request body as exchanged with callers and with MVola."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

CORRELATION_FIELDS = (
    "request_date",
    "requesting_organisation_transaction_reference",
    "original_transaction_reference",
)


class PaymentRequest(BaseModel):
    """
    Merchant payment as accepted on POST /payment and forwarded to MVola.

    Field names follow MVola's camelCase wire format. Only `debitParty` is
    required, since the payer's MSISDN goes into a header; every other field,
    including unknown ones, is forwarded as the caller sent it and left for
    MVola to judge. Fields the caller omits stay off the wire.
    """

    amount: Optional[Any] = None
    currency: Optional[Any] = None
    description_text: Optional[Any] = None
    debit_party: list[dict[str, Any]]
    credit_party: Optional[Any] = None
    metadata: Optional[Any] = None
    request_date: Optional[Any] = None
    requesting_organisation_transaction_reference: Optional[Any] = None
    original_transaction_reference: Optional[Any] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    @property
    def payer_msisdn(self) -> str:
        """Account identifier of the payer; the first debit-party entry."""
        return self.debit_party[0]["value"]

    def clear_correlation_fields(self) -> None:
        for name in CORRELATION_FIELDS:
            setattr(self, name, "")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)
