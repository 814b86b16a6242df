import json

import firebase_admin
from firebase_admin import credentials, firestore_async
from google.cloud.firestore import AsyncClient

from src.utils.logger import get_logger
from src.utils.settings.firebase import FirebaseSettings

logger = get_logger(__name__)


def _load_service_account(raw_key: str) -> dict:
    try:
        return json.loads(raw_key)
    except json.JSONDecodeError as e:
        raise ValueError(
            "Failed to parse FIREBASE_ADMIN_SDK_KEY. "
            "Make sure it is the service-account JSON as a single string."
        ) from e


def initialize_firebase_app(
    settings: FirebaseSettings | None = None,
) -> firebase_admin.App | None:
    """Initialize (or reuse) the default Firebase Admin app.

    Returns None when no service-account key is configured so the API can
    still boot for local work against dependency overrides.
    """
    settings = settings or FirebaseSettings()
    raw_key = settings.FIREBASE_ADMIN_SDK_KEY.get_secret_value()
    if not raw_key:
        logger.warning(
            "FIREBASE_ADMIN_SDK_KEY is not set; identity and store access disabled"
        )
        return None

    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    options = {}
    if settings.FIREBASE_PROJECT_ID:
        options["projectId"] = settings.FIREBASE_PROJECT_ID

    app = firebase_admin.initialize_app(
        credentials.Certificate(_load_service_account(raw_key)), options or None
    )
    logger.info("Firebase Admin app initialized", project_id=app.project_id)
    return app


def get_firestore_client(app: firebase_admin.App) -> AsyncClient:
    """Get the async Firestore client bound to the given Firebase app."""
    return firestore_async.client(app)
