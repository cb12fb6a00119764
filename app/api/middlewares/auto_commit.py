"""
Middleware committing the request's database session once the response is produced.
"""

import logging
from typing import Awaitable, Callable

from fastapi import Request, Response
from fastapi_async_sqlalchemy import db
from fastapi_async_sqlalchemy.exceptions import MissingSessionError
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class AutoCommitMiddleware(BaseHTTPMiddleware):
    """
    Commits on responses below 400 and rolls back otherwise.

    A folder delete that was refused never leaves partial state behind, and reads
    commit an empty transaction.
    """

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        try:
            response = await call_next(request)
        except Exception as e:
            await self._rollback(reason=str(e))
            raise

        if response.status_code < 400:
            await self._commit()
        else:
            await self._rollback(reason=f"status {response.status_code}")
        return response

    async def _commit(self) -> None:
        try:
            await db.session.commit()
            logger.debug("Database transaction committed successfully")
        except MissingSessionError:
            # Endpoints that never touched the database have no session
            logger.debug("No database session found for request - skipping commit")
        except Exception as e:
            logger.warning(f"Failed to commit database transaction: {e}")

    async def _rollback(self, reason: str) -> None:
        try:
            await db.session.rollback()
            logger.debug(f"Database transaction rolled back; reason: {reason}")
        except MissingSessionError:
            logger.debug("No database session found for rollback - skipping rollback")
        except Exception as e:
            logger.warning(f"Failed to rollback database transaction: {e}")
