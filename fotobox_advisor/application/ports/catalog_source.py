from __future__ import annotations

from abc import ABC, abstractmethod

from fotobox_advisor.domain.entities.catalog import Catalog


class CatalogSourcePort(ABC):
    @abstractmethod
    def load(self) -> Catalog:
        """Return an immutable catalog snapshot for one session's lifetime."""
        raise NotImplementedError
