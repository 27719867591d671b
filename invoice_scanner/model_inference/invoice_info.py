"""
Invoice Record.

This module defines the structured invoice produced by the scanner.
Field names are snake_case in Python and camelCase on the wire, which
is what the prompt asks the model to emit.

Author: ML Engineering Team
"""

import json
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator
from pydantic.alias_generators import to_camel


class InvoiceInfo(BaseModel):
    """
    Payer, receiver and payment details of a single invoice.

    Unknown values are empty strings, an unknown amount is 0.0.
    Instances are immutable.

    Example:
        >>> info = InvoiceInfo.model_validate_json('{"payerName": "Acme", "amount": 10}')
        >>> info.payer_name, info.amount
        ('Acme', 10.0)
        >>> info.to_dict()["payerName"]
        'Acme'
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    payer_name: StrictStr = ""
    payer_inn: StrictStr = ""
    payer_address: StrictStr = ""
    receiver_name: StrictStr = ""
    receiver_inn: StrictStr = ""
    receiver_address: StrictStr = ""
    receiver_account: StrictStr = ""
    receiver_bank_name: StrictStr = ""
    receiver_bank_bic: StrictStr = ""
    receiver_bank_corr_account: StrictStr = ""
    amount: float = Field(0.0, allow_inf_nan=False)
    purpose: StrictStr = ""

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_is_number(cls, value: Any) -> Any:
        # JSON true/false are ints to Python; "1000" is text, not a number
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("amount must be a JSON number")
        return value

    def to_dict(self) -> Dict[str, Any]:
        """Return the record keyed by camelCase field names."""
        return self.model_dump(by_alias=True)

    def to_json(self, indent: int = 2) -> str:
        """
        Convert to a pretty JSON string with camelCase keys.

        Non-ASCII text (Cyrillic names and addresses) is kept as-is.
        """
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False, allow_nan=False)
