"""Optimistic-concurrency counter for the shared sidebar configuration."""

from datetime import datetime, timezone

from fastapi import status
from google.cloud.firestore import (
    AsyncClient,
    AsyncDocumentReference,
    AsyncTransaction,
    async_transactional,
)

from src.api.core.exceptions.base import AdminConsoleException
from src.api.core.messages import MessageCode
from src.database.collections import (
    COLLECTION_SIDEBAR_CONFIG_VERSIONS,
    SHARED_SIDEBAR_CONFIG_DOCUMENT,
)
from src.modules.user.store import firestore_errors
from src.utils.logger import get_logger

logger = get_logger(__name__)

INITIAL_VERSION = 0


@async_transactional
async def _compare_and_advance(
    transaction: AsyncTransaction, ref: AsyncDocumentReference, expected: int
) -> int:
    snapshot = await ref.get(transaction=transaction)
    current = (snapshot.to_dict() or {}).get("version", INITIAL_VERSION)
    if current != expected:
        raise AdminConsoleException(
            MessageCode.STALE_VERSION,
            status.HTTP_409_CONFLICT,
            {"currentVersion": current, "suppliedVersion": expected},
        )
    new_version = current + 1
    transaction.set(
        ref, {"version": new_version, "updatedAt": datetime.now(timezone.utc)}
    )
    return new_version


@async_transactional
async def _force_advance(
    transaction: AsyncTransaction, ref: AsyncDocumentReference
) -> int:
    snapshot = await ref.get(transaction=transaction)
    new_version = (snapshot.to_dict() or {}).get("version", INITIAL_VERSION) + 1
    transaction.set(
        ref, {"version": new_version, "updatedAt": datetime.now(timezone.utc)}
    )
    return new_version


class SidebarVersionStore:
    def __init__(self, db: AsyncClient):
        self.db = db

    @property
    def _ref(self) -> AsyncDocumentReference:
        return self.db.collection(COLLECTION_SIDEBAR_CONFIG_VERSIONS).document(
            SHARED_SIDEBAR_CONFIG_DOCUMENT
        )

    async def get_version(self) -> int:
        with firestore_errors("get_sidebar_version"):
            snapshot = await self._ref.get()
        if not snapshot.exists:
            return INITIAL_VERSION
        return (snapshot.to_dict() or {}).get("version", INITIAL_VERSION)

    async def advance(self, expected: int | None) -> int:
        """Advance the counter and return the new version.

        With an expected version the advance is a compare-and-set and raises
        StaleVersion on mismatch. Without one the counter is bumped
        unconditionally.
        """
        transaction = self.db.transaction()
        with firestore_errors("advance_sidebar_version"):
            if expected is None:
                new_version = await _force_advance(transaction, self._ref)
            else:
                new_version = await _compare_and_advance(
                    transaction, self._ref, expected
                )
        logger.info(
            "Advanced sidebar config version",
            expected=expected,
            version=new_version,
        )
        return new_version
