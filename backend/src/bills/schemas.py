import enum
from typing import Any, Literal, Optional, Union

from pydantic import Field

from src.common.schemas import AppBaseModel

# Raw bill JSON objects spread into display records
DisplayBill = dict[str, Any]


class BillStatus(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REFUSED = "refused"


class BillPayload(AppBaseModel):
    """
    Body sent to the store when an employee submits a new bill.
    Serialized with camelCase aliases (``fileUrl``, ``fileName``).
    """

    email: str = Field(..., description="Owner e-mail, taken from the session")
    type: str = Field(..., description="Expense type (Transport, Restaurants et bars, ...)")
    name: str = Field("", description="Expense name")
    amount: Union[int, float] = Field(..., description="Amount TTC, NaN when the form value was not a number")
    date: str = Field(..., description="Expense date as typed in the form (YYYY-MM-DD)")
    vat: str = Field("", description="VAT amount, kept as typed")
    pct: Union[int, float] = Field(..., description="VAT percentage, NaN when the form value was not a number")
    commentary: str = Field("", description="Free-form commentary")
    file_url: Optional[str] = Field(None, alias="fileUrl", description="Proof URL returned by the upload")
    file_name: Optional[str] = Field(None, alias="fileName", description="Proof file name")
    status: Literal["pending"] = Field(
        BillStatus.PENDING.value,
        description="Always pending for a freshly created bill"
    )
