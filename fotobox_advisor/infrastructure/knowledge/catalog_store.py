from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from fotobox_advisor.application.dto.catalog_document import CatalogDocumentDTO
from fotobox_advisor.application.exceptions import CatalogError
from fotobox_advisor.application.ports.catalog_source import CatalogSourcePort
from fotobox_advisor.domain.entities.catalog import Catalog
from fotobox_advisor.infrastructure.knowledge.catalog_data import DEFAULT_CATALOG


def build_catalog(document: dict[str, Any]) -> Catalog:
    try:
        return CatalogDocumentDTO.model_validate(document).to_catalog()
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog document: {e}") from e


class CatalogStore(CatalogSourcePort):
    """Loads the knowledge document from a JSON file, or the bundled default."""

    def __init__(self, path: str | None = None, document: dict[str, Any] | None = None) -> None:
        self._path = Path(path) if path else None
        self._document = document
        self._logger = logging.getLogger(__name__)

    def load(self) -> Catalog:
        document = self._document if self._document is not None else self._read()
        catalog = build_catalog(document)
        self._logger.info(
            "Catalog loaded",
            extra={"reason": str(self._path) if self._path else "bundled default"},
        )
        return catalog

    def _read(self) -> dict[str, Any]:
        if self._path is None:
            return DEFAULT_CATALOG
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogError(f"Could not read catalog {self._path}: {e}") from e
