import logging
import re
from collections.abc import Callable, Mapping
from typing import Any, Optional, Union

from src.bills.schemas import BillPayload
from src.common.navigation import ROUTES_PATH
from src.new_bill.exceptions import INVALID_FILE_MESSAGE, DraftNotReadyError
from src.new_bill.schemas import ACCEPTED_EXTENSIONS, DraftState, NewBillForm, SelectedFile
from src.store.exceptions import TransportError
from src.store.service import StoreService
from src.users.schemas import UserSession

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")

# States from which the draft may be (re)submitted
SUBMITTABLE_STATES = frozenset({DraftState.FILE_ACCEPTED, DraftState.FAILED})


def parse_int(value: str) -> Union[int, float]:
    """
    Parse the leading integer of a form value: "100" -> 100, "100.5" -> 100,
    "12abc" -> 12. Returns NaN when there is none, so bad input stays visible.
    Digit runs too long for int() give +/-inf.
    """
    match = _LEADING_INT.match(value or "")
    if not match:
        return float("nan")
    try:
        return int(match.group(1))
    except ValueError:
        return float(match.group(1))


class NewBillSubmitter:
    """
    Drives one new bill form: proof upload on file change, then submission.

    One instance per form interaction; the draft (state, file reference,
    bill id) is never shared. Submissions are not deduplicated, so the
    caller must disable its submit control while one is in flight.
    """

    def __init__(
        self,
        store: StoreService,
        session: UserSession,
        on_navigate: Callable[[str], Any],
        alert: Callable[[str], Any],
    ):
        self.store = store
        self.session = session
        self.on_navigate = on_navigate
        self.alert = alert

        self.state = DraftState.IDLE
        self.file_name: Optional[str] = None
        self.file_url: Optional[str] = None
        self.bill_id: Optional[str] = None

    async def handle_file_change(self, file: SelectedFile) -> DraftState:
        """
        Validate the selected proof and upload it.

        An invalid extension clears the file reference and raises the alert;
        it is not an error for the caller. An upload failure is logged and
        leaves the draft unsubmittable until another file is accepted.
        """
        self.state = DraftState.FILE_SELECTED
        self.file_name = None
        self.file_url = None

        if file.extension not in ACCEPTED_EXTENSIONS:
            logger.info(f"Rejected proof file {file.base_name!r}", extra={"content_type": file.content_type})
            self.state = DraftState.FILE_REJECTED
            self.alert(INVALID_FILE_MESSAGE)
            return self.state

        file_name = file.base_name
        try:
            response = await self.store.bills().create(
                data={"email": self.session.email},
                files={"file": (file_name, file.content, file.content_type or "application/octet-stream")},
            )
            if not isinstance(response, Mapping):
                raise TransportError(f"Réponse d'envoi inattendue : {response!r}")
            file_url = response.get("fileUrl")
            bill_id = response.get("key") or response.get("id")
            if not file_url or not bill_id:
                raise TransportError(f"Réponse d'envoi incomplète : {response!r}")
        except TransportError as e:
            logger.error(f"Proof upload failed for {file_name!r}: {e.message}", exc_info=True)
            return self.state

        self.bill_id = str(bill_id)
        self.file_url = file_url
        self.file_name = file_name
        self.state = DraftState.FILE_ACCEPTED
        logger.info(f"Proof uploaded for bill {self.bill_id}", extra={"file_name": file_name})
        return self.state

    def build_payload(self, form: NewBillForm) -> BillPayload:
        return BillPayload(
            email=self.session.email,
            type=form.type,
            name=form.name,
            amount=parse_int(form.amount),
            date=form.date,
            vat=form.vat,
            pct=parse_int(form.pct),
            commentary=form.commentary,
            file_url=self.file_url,
            file_name=self.file_name,
        )

    async def handle_submit(self, form: NewBillForm) -> BillPayload:
        """
        Submit the draft and navigate back to the bills page.

        Raises:
            DraftNotReadyError: If no proof was accepted (store is not called)
            TransportError: If the store rejects the update (state becomes FAILED)
        """
        if self.state not in SUBMITTABLE_STATES or not (self.file_url and self.file_name and self.bill_id):
            raise DraftNotReadyError(self.state.value)

        payload = self.build_payload(form)
        self.state = DraftState.SUBMITTED
        try:
            await self.update_bill(payload)
        except TransportError as e:
            self.state = DraftState.FAILED
            logger.error(f"Bill {self.bill_id} submission failed: {e.message}")
            raise

        self.state = DraftState.COMPLETED
        self.on_navigate(ROUTES_PATH["Bills"])
        return payload

    async def update_bill(self, payload: BillPayload) -> dict[str, Any]:
        # NaN amounts serialize to null, as the browser's JSON.stringify does
        return await self.store.bills().update(
            data=payload.model_dump_json(by_alias=True),
            selector=self.bill_id,
        )
