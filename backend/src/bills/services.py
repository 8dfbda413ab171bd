import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from src.bills.exceptions import MalformedRecordError
from src.bills.formatting import format_date, format_status
from src.bills.schemas import DisplayBill
from src.store.service import StoreService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordResult:
    """Outcome of transforming one raw bill: either a display record or the error."""
    raw: Any
    value: Optional[DisplayBill] = None
    error: Optional[MalformedRecordError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BillsReader:
    """
    Reads the current user's bills from the store and prepares them for display.

    The list is returned in store order; sorting is left to the presentation layer.
    """

    def __init__(self, store: StoreService):
        self.store = store

    async def get_bills(self) -> list[DisplayBill]:
        """
        Fetch all bills and convert them to display records.

        A record that cannot be transformed keeps its raw values (status is
        still translated) instead of failing the whole list.

        Raises:
            TransportError: If the store's list call fails (propagated as-is)
        """
        snapshot = await self.store.bills().list()

        results = [self._transform(doc) for doc in snapshot]
        bills = [self._unwrap(result) for result in results]

        failed = sum(1 for result in results if not result.ok)
        logger.info(f"Fetched {len(bills)} bills", extra={"malformed": failed})
        return bills

    def _transform(self, doc: Any) -> RecordResult:
        try:
            if not isinstance(doc, Mapping):
                raise MalformedRecordError(f"Bill record must be an object, got {type(doc).__name__}", record=doc)
            value = {
                **doc,
                "date": format_date(doc.get("date")),
                "status": format_status(doc.get("status")),
            }
            return RecordResult(raw=doc, value=value)
        except MalformedRecordError as e:
            return RecordResult(raw=doc, error=e)

    def _unwrap(self, result: RecordResult) -> Any:
        if result.ok:
            return result.value

        logger.warning(f"{result.error.message} for {result.raw!r}")
        doc = result.raw
        if not isinstance(doc, Mapping):
            return doc
        fallback = {**doc}
        if "status" in doc:
            fallback["status"] = format_status(doc["status"])
        return fallback
