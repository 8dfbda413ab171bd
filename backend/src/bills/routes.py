from typing import Any

from fastapi import APIRouter, File, Form, UploadFile, status

from src.bills.services import BillsReader
from src.deps import CurrentSession, StoreDependency
from src.new_bill.exceptions import FileValidationError
from src.new_bill.schemas import NewBillForm, SelectedFile
from src.new_bill.services import NewBillSubmitter
from src.common.schemas import AppBaseModel

router = APIRouter()


class NewBillResponse(AppBaseModel):
    bill_id: str
    redirect_to: str


@router.get("/", status_code=status.HTTP_200_OK, summary="List the employee's bills")
async def get_bills(session: CurrentSession, store: StoreDependency) -> list[Any]:
    return await BillsReader(store).get_bills()


@router.post("/", response_model=NewBillResponse, status_code=status.HTTP_201_CREATED, summary="Submit a new bill")
async def create_bill(
    session: CurrentSession,
    store: StoreDependency,
    file: UploadFile = File(..., description="Proof (jpg, jpeg, png)"),
    type: str = Form(...),
    name: str = Form(""),
    amount: str = Form(""),
    date: str = Form(""),
    vat: str = Form(""),
    pct: str = Form(""),
    commentary: str = Form(""),
):
    alerts: list[str] = []
    routes: list[str] = []
    submitter = NewBillSubmitter(store=store, session=session, on_navigate=routes.append, alert=alerts.append)

    selected = SelectedFile(
        name=file.filename or "",
        content_type=file.content_type or "",
        content=await file.read(),
    )
    await submitter.handle_file_change(selected)
    if alerts:
        raise FileValidationError(alerts[0])

    # Domain exceptions propagate to the global exception handler
    form = NewBillForm(type=type, name=name, amount=amount, date=date, vat=vat, pct=pct, commentary=commentary)
    await submitter.handle_submit(form)

    return NewBillResponse(bill_id=submitter.bill_id, redirect_to=routes[-1])
