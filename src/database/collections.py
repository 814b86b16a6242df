"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations; collections appear on first write. These
constants are the single source of truth for where documents live. The
``users`` collection is shared with the partner application, so its field
names stay camelCase.
"""

COLLECTION_USERS = "users"
COLLECTION_ORPHANED_IDENTITIES = "orphaned_identities"
COLLECTION_SIDEBAR_CONFIG_VERSIONS = "sidebar_config_versions"

# Single document holding the version of the shared sidebar configuration
SHARED_SIDEBAR_CONFIG_DOCUMENT = "shared"
