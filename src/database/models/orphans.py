"""Orphaned-entry kinds recorded when a two-system operation half-completes."""

from enum import Enum


class OrphanKind(str, Enum):
    # Identity account exists, user document does not
    IDENTITY_WITHOUT_RECORD = "identity_without_record"
    # User document exists, identity account was already deleted
    RECORD_WITHOUT_IDENTITY = "record_without_identity"


class OrphanStage(str, Enum):
    CREATE_COMPENSATION = "create_compensation"
    PERSIST_COMPENSATION = "persist_compensation"
    DELETE_RECORD = "delete_record"
