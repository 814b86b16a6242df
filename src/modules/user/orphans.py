"""Registry of half-completed identity/record operations.

Create and delete span two systems without a shared transaction. When a
compensating step cannot restore consistency, the leftover is written here so
operators can list and reconcile it.
"""

from datetime import datetime, timezone
from typing import Any

from google.api_core.exceptions import GoogleAPIError
from google.cloud.firestore import AsyncClient

from src.database.collections import COLLECTION_ORPHANED_IDENTITIES
from src.database.models import OrphanKind, OrphanStage
from src.modules.user.store import firestore_errors
from src.utils.logger import get_logger

logger = get_logger(__name__)


def build_orphan_entry(
    uid: str,
    email: str | None,
    kind: OrphanKind,
    stage: OrphanStage,
    reason: str,
) -> dict[str, Any]:
    return {
        "uid": uid,
        "email": email,
        "kind": kind.value,
        "stage": stage.value,
        "reason": reason,
        "detectedAt": datetime.now(timezone.utc),
    }


class OrphanRegistry:
    def __init__(self, db: AsyncClient):
        self.db = db

    async def record(self, entry: dict[str, Any]) -> bool:
        """Persist an orphan entry; the full entry is always logged first."""
        logger.error("Orphaned entry detected", **entry)
        try:
            # Auto ids: one uid can leave several orphans over time
            await self.db.collection(COLLECTION_ORPHANED_IDENTITIES).add(entry)
        except GoogleAPIError as e:
            # The store is often the reason we got here; the log line above
            # is then the only trace.
            logger.error(
                "Failed to persist orphan entry", uid=entry["uid"], error=str(e)
            )
            return False
        return True

    async def list_orphans(self) -> list[dict[str, Any]]:
        orphans = []
        with firestore_errors("list_orphans"):
            async for snapshot in self.db.collection(
                COLLECTION_ORPHANED_IDENTITIES
            ).stream():
                orphans.append({"id": snapshot.id, **(snapshot.to_dict() or {})})
        return orphans
