"""
Core Data Model for Bill Manager

A Bill is the only record the system keeps: a name that identifies it and
the amount owed.

DESIGN DECISION: We use Pydantic v2 so the invariants live on the model
itself rather than being re-checked by every caller:
1. The name is required, stripped and frozen after creation
2. The amount must be a number; NaN is never a valid amount
3. Assignments are validated, so an update can never store NaN
"""

import math
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    TypeAdapter,
)


def _reject_digit_separators(value: Any) -> Any:
    """Plain decimal notation only; "1_000" is not a number here."""
    if isinstance(value, str) and "_" in value:
        raise ValueError("Digit separators are not allowed")
    return value


def _reject_nan(value: float) -> float:
    if math.isnan(value):
        raise ValueError("Amount must be a number, not NaN")
    return value


# Shared by the model field and the terminal parser so both accept
# exactly the same numbers. Overflowing input such as "1e400" parses
# to infinity and is kept.
Amount = Annotated[
    float,
    BeforeValidator(_reject_digit_separators),
    AfterValidator(_reject_nan),
    Field(description="Amount owed"),
]

amount_adapter: TypeAdapter[float] = TypeAdapter(Amount)


def parse_amount(text: str) -> float:
    """
    Parse user-supplied text as a bill amount.

    No range checks: negatives, zero and very large magnitudes (including
    values that overflow to infinity) are all accepted. Raises
    pydantic.ValidationError (a ValueError) on anything that is not a
    number, on NaN, and on digit separators.
    """
    return amount_adapter.validate_python(text)


class Bill(BaseModel):
    """
    A named bill with the amount owed.

    The name is the identity of the bill and cannot change.
    Only the amount is mutable, and only through the store's update.
    """
    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    name: str = Field(
        ...,
        min_length=1,
        frozen=True,
        description="Bill name (unique key)"
    )
    amount: Amount

    def to_display_line(self) -> str:
        """Format the bill for the terminal listing."""
        return f"{self.name}: {self.amount}"

    def to_log_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for structured logging."""
        return {
            "name": self.name,
            "amount": self.amount,
        }
