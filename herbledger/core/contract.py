"""
Herb contract - stateless dispatcher from function name and string
arguments to one record operation.
"""

from typing import Callable, Dict, List, Optional, Sequence

from . import config
from .dao import change_herb_holder, init_ledger, query_all_herbs, query_herb, record_herb
from .errors import LedgerError
from .store import IRecordStore
from ..api.schemas import LedgerResponse
from ..util.logging import logger


class HerbContract:
    """Routes invocations to record operations against a single store."""

    def __init__(self, store: Optional[IRecordStore] = None):
        self.store = store if store is not None else config.get_store()
        self._routes: Dict[str, Callable[[Sequence[str]], Optional[bytes]]] = {
            "queryHerb": lambda args: query_herb(self.store, args),
            "initLedger": lambda args: init_ledger(self.store),
            "recordHerb": lambda args: record_herb(self.store, args),
            "queryAllHerb": lambda args: query_all_herbs(self.store),
            "changeHerbHolder": lambda args: change_herb_holder(self.store, args),
        }

    @property
    def functions(self) -> List[str]:
        return list(self._routes)

    def init(self) -> LedgerResponse:
        """Instantiation hook; the ledger needs no setup beyond its store."""
        return LedgerResponse.success()

    def invoke(self, function: str, args: Sequence[str] = ()) -> LedgerResponse:
        """Run one operation and wrap its outcome in a response."""
        handler = self._routes.get(function)
        if handler is None:
            logger.log_dispatch(function, "rejected")
            return LedgerResponse.error("Invalid Smart Contract function name.")

        try:
            payload = handler(list(args))
        except LedgerError as e:
            logger.log_dispatch(function, "failed", {"error": e.message, **e.details})
            return LedgerResponse.error(e.message)

        logger.log_dispatch(function, "success")
        return LedgerResponse.success(payload)
