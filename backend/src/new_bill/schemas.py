import enum

from pydantic import Field

from src.common.schemas import AppBaseModel

ACCEPTED_EXTENSIONS = frozenset({"jpg", "jpeg", "png"})


class DraftState(str, enum.Enum):
    IDLE = "idle"
    FILE_SELECTED = "file_selected"
    FILE_REJECTED = "file_rejected"
    FILE_ACCEPTED = "file_accepted"
    SUBMITTED = "submitted"
    COMPLETED = "completed"
    FAILED = "failed"


class SelectedFile(AppBaseModel):
    """File picked in the proof input of the new bill form."""

    name: str = Field(..., description="File name, possibly a browser fake path")
    content_type: str = Field("", description="Declared MIME type")
    content: bytes = Field(b"", description="Raw file content")

    @property
    def base_name(self) -> str:
        """Last segment of the name (``C:\\fakepath\\file.png`` -> ``file.png``)."""
        return self.name.replace("\\", "/").split("/")[-1]

    @property
    def extension(self) -> str:
        base = self.base_name
        if "." not in base:
            return ""
        return base.rsplit(".", 1)[-1].lower()


class NewBillForm(AppBaseModel):
    """Field values of the new bill form, as typed (strings)."""

    type: str = Field(..., description="Expense type")
    name: str = Field("", description="Expense name")
    amount: str = Field("", description="Amount TTC")
    date: str = Field("", description="Expense date (YYYY-MM-DD)")
    vat: str = Field("", description="VAT amount")
    pct: str = Field("", description="VAT percentage")
    commentary: str = Field("", description="Commentary")
