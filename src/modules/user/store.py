"""Firestore-backed user document store."""

from contextlib import contextmanager
from typing import Any, Iterator

from fastapi import status
from google.api_core.exceptions import GoogleAPIError
from google.cloud.firestore import AsyncClient

from src.api.core.exceptions.base import AdminConsoleException
from src.api.core.messages import MessageCode
from src.database.collections import COLLECTION_USERS
from src.utils.logger import get_logger

logger = get_logger(__name__)


@contextmanager
def firestore_errors(operation: str, **context: Any) -> Iterator[None]:
    """Translate Firestore client errors into UpstreamFailure."""
    try:
        yield
    except GoogleAPIError as e:
        logger.error(
            "Firestore operation failed", operation=operation, error=str(e), **context
        )
        raise AdminConsoleException(
            MessageCode.UPSTREAM_FAILURE,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            {"operation": operation, "description": str(e), **context},
        ) from e


class UserStore:
    """User documents keyed by identity-provider uid."""

    def __init__(self, db: AsyncClient):
        self.db = db

    def _document(self, uid: str):
        return self.db.collection(COLLECTION_USERS).document(uid)

    async def list_users(self) -> list[dict[str, Any]]:
        users = []
        with firestore_errors("list_users"):
            async for snapshot in self.db.collection(COLLECTION_USERS).stream():
                users.append({"uid": snapshot.id, **(snapshot.to_dict() or {})})
        return users

    async def get_user(self, uid: str) -> dict[str, Any] | None:
        with firestore_errors("get_user", uid=uid):
            snapshot = await self._document(uid).get()
        if not snapshot.exists:
            return None
        return {"uid": snapshot.id, **(snapshot.to_dict() or {})}

    async def create_user(self, uid: str, data: dict[str, Any]) -> None:
        with firestore_errors("create_user", uid=uid):
            await self._document(uid).set(data)

    async def update_user(self, uid: str, data: dict[str, Any]) -> None:
        with firestore_errors("update_user", uid=uid):
            await self._document(uid).update(data)

    async def delete_user(self, uid: str) -> None:
        with firestore_errors("delete_user", uid=uid):
            await self._document(uid).delete()
