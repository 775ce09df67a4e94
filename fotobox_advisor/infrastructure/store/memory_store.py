from __future__ import annotations

import logging
import uuid
from collections import OrderedDict

from fotobox_advisor.application.ports.session_store import SessionStorePort
from fotobox_advisor.application.use_cases.flow_controller import FlowController
from fotobox_advisor.application.use_cases.selection import SelectionStore
from fotobox_advisor.domain.entities.catalog import Catalog


class MemorySessionStore(SessionStorePort):
    """One FlowController (and its own SelectionStore) per session id, in memory only."""

    def __init__(self, catalog: Catalog, session_limit: int = 1000) -> None:
        self._catalog = catalog
        self._sessions: OrderedDict[str, FlowController] = OrderedDict()
        self._session_limit = max(1, session_limit)
        self._logger = logging.getLogger(__name__)

    def create(self) -> tuple[str, FlowController]:
        session_id = uuid.uuid4().hex
        controller = FlowController(self._catalog, SelectionStore())
        self._sessions[session_id] = controller
        while len(self._sessions) > self._session_limit:
            evicted, _ = self._sessions.popitem(last=False)
            self._logger.info("Session evicted", extra={"session_id": evicted, "reason": "session_limit"})
        return session_id, controller

    def get(self, session_id: str) -> FlowController | None:
        controller = self._sessions.get(session_id)
        if controller is not None:
            self._sessions.move_to_end(session_id)
        return controller

    def discard(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)
