from abc import ABC, abstractmethod

from fotobox_advisor.application.use_cases.flow_controller import FlowController


class SessionStorePort(ABC):
    @abstractmethod
    def create(self) -> tuple[str, FlowController]:
        raise NotImplementedError

    @abstractmethod
    def get(self, session_id: str) -> FlowController | None:
        raise NotImplementedError

    @abstractmethod
    def discard(self, session_id: str) -> None:
        raise NotImplementedError
