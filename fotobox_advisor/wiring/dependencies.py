from functools import lru_cache
import logging

from fotobox_advisor.core.config import settings
from fotobox_advisor.application.ports.catalog_source import CatalogSourcePort
from fotobox_advisor.application.ports.session_store import SessionStorePort
from fotobox_advisor.application.use_cases.pricing import PricingEngine
from fotobox_advisor.domain.entities.catalog import Catalog
from fotobox_advisor.infrastructure.knowledge.catalog_store import CatalogStore
from fotobox_advisor.infrastructure.store.memory_store import MemorySessionStore


_session_store: MemorySessionStore | None = None


def get_catalog_source() -> CatalogSourcePort:
    return CatalogStore(path=settings.CATALOG_PATH)


@lru_cache
def get_catalog() -> Catalog:
    logger = logging.getLogger(__name__)
    logger.info("CATALOG_PATH=%s", settings.CATALOG_PATH or "(bundled)")
    return get_catalog_source().load()


def get_session_store() -> SessionStorePort:
    global _session_store
    if _session_store is None:
        _session_store = MemorySessionStore(get_catalog(), session_limit=settings.SESSION_LIMIT)
    return _session_store


@lru_cache
def get_pricing_engine() -> PricingEngine:
    return PricingEngine()
