"""Factory for user documents as stored in the users collection."""

from datetime import datetime, timezone
from uuid import uuid4

import factory


class UserDocumentFactory(factory.DictFactory):
    """Builds normalized, valid user documents (camelCase keys)."""

    email = factory.Sequence(lambda n: f"user{n}@example.com")
    displayName = factory.Faker("name")
    companyName = factory.Faker("company")
    role = "user"
    status = "active"
    department = ""
    position = ""
    subscriptionType = None
    createdBy = None
    createdAt = factory.LazyFunction(lambda: datetime.now(timezone.utc))
    updatedAt = factory.SelfAttribute("createdAt")

    @classmethod
    async def create_in_store(cls, store, uid: str | None = None, **kwargs) -> dict:
        """Build a document, persist it under uid and return it with its uid."""
        document = cls(**kwargs)
        uid = uid or uuid4().hex
        await store.create_user(uid, document)
        return {"uid": uid, **document}
