from contextlib import asynccontextmanager
import logging

from app.core.config import settings
from app.core.document_store import get_document_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    store = get_document_store()
    store.init()
    logger.info("document_store_ready path=%s ai_provider=%s", settings.document_db_path, settings.ai_provider)
    yield
    store.close()
