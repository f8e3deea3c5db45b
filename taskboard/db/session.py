from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker

from taskboard.core.config import settings
from taskboard.helpers.getters import isDebugMode
import logging
logger = logging.getLogger(__name__)

if isDebugMode() and settings.DATABASE_EXTERNAL_URL:
    logger.info("Using EXTERNAL database URL for debug mode")
    DATABASE_URL = settings.DATABASE_EXTERNAL_URL
else:
    DATABASE_URL = settings.DATABASE_URL

engine = create_async_engine(DATABASE_URL, future=True, echo=False, pool_pre_ping=True)
SessionAsync = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
