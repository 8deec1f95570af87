"""
Store call guard.

Every Prisma call goes through ``guarded()`` so that:
- it is bounded by Config.STORE_TIMEOUT_SECONDS (timeout → StoreUnavailableError)
- a lost connection surfaces as StoreUnavailableError (retryable)
- any other Prisma error surfaces as StoreFailureError
- errors listed in ``passthrough`` reach the repository untouched, for the
  ones it translates itself (e.g. unique violations)

Original errors are logged here and chained, never shown to API callers.
"""

import asyncio
import logging
from typing import Awaitable, Optional, TypeVar

from prisma.errors import ClientNotConnectedError, PrismaError

from messenger.config.settings import Config
from messenger.domain.exceptions import StoreFailureError, StoreUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def guarded(
    operation: str,
    awaitable: Awaitable[T],
    timeout: Optional[float] = None,
    passthrough: tuple[type[Exception], ...] = (),
) -> T:
    limit = Config.STORE_TIMEOUT_SECONDS if timeout is None else timeout
    try:
        return await asyncio.wait_for(awaitable, timeout=limit)
    except passthrough:
        raise
    except asyncio.TimeoutError as e:
        logger.warning(f"[Store] {operation} timed out after {limit}s")
        raise StoreUnavailableError(operation) from e
    except ClientNotConnectedError as e:
        logger.error(f"[Store] {operation} failed, client not connected")
        raise StoreUnavailableError(operation) from e
    except PrismaError as e:
        logger.error(f"[Store] {operation} failed: {type(e).__name__}: {e}")
        raise StoreFailureError(operation) from e
