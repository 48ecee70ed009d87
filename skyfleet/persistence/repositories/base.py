"""Generic async Firestore repository for top-level collections."""

from __future__ import annotations

import logging
from typing import Any, Generic, Type, TypeVar

from google.api_core.exceptions import Conflict, FailedPrecondition

from skyfleet.contracts.common import FirestoreModel, VersionedModel
from skyfleet.persistence.errors import (
    ConcurrencyConflictError,
    DocumentAlreadyExistsError,
    DocumentNotFoundError,
)
from skyfleet.persistence.firestore_client import get_firestore_client

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=FirestoreModel)


class BaseRepository(Generic[T]):
    """CRUD for a top-level Firestore collection.

    Each document ID is the entity's natural key (``key_field``); the key
    is not repeated inside the document body.

    Serialization relies entirely on the contract's ``to_firestore()``
    and ``from_firestore()`` methods, with no extra mapping layer. Loaded
    relations are declared ``exclude=True`` on the contracts and so are
    never written.

    Updates of ``VersionedModel`` entities are compare-and-swap on the
    ``version`` token, made atomic with a ``last_update_time`` write
    precondition.
    """

    def __init__(self, model_class: Type[T], collection_name: str, key_field: str = "id"):
        self._model_class = model_class
        self._collection_name = collection_name
        self._key_field = key_field

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _collection_ref(self):
        return get_firestore_client().collection(self._collection_name)

    def _key(self, entity: T) -> str:
        return getattr(entity, self._key_field)

    def _hydrate(self, doc) -> T:
        data = doc.to_dict()
        data[self._key_field] = doc.id
        return self._model_class.from_firestore(data)

    async def _stream(self, query) -> list[T]:
        results: list[T] = []
        async for doc in query.stream():
            results.append(self._hydrate(doc))
        return results

    async def _where(self, field: str, op: str, value: Any) -> list[T]:
        return await self._stream(self._collection_ref().where(field, op, value))

    def _before_update(self, stored: T, entity: T) -> None:
        """Hook: reject writes the stored state doesn't allow."""

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get(self, doc_id: str) -> T | None:
        """Fetch a single document by ID. Returns *None* if missing."""
        doc = await self._collection_ref().document(doc_id).get()
        if not doc.exists:
            return None
        return self._hydrate(doc)

    async def require(self, doc_id: str) -> T:
        """Like ``get`` but raises ``DocumentNotFoundError`` if missing."""
        entity = await self.get(doc_id)
        if entity is None:
            raise DocumentNotFoundError(self._collection_name, doc_id)
        return entity

    async def list_all(self) -> list[T]:
        """Stream every document in the collection."""
        return await self._stream(self._collection_ref())

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, entity: T) -> str:
        """Create a document under the entity's key. Returns the key.

        Null fields are written too, so that equality queries on null
        (e.g. flights not completed yet) match.
        """
        data = entity.to_firestore(exclude_none=False)
        doc_id = data.pop(self._key_field)
        try:
            await self._collection_ref().document(doc_id).create(data)
        except Conflict as exc:
            raise DocumentAlreadyExistsError(self._collection_name, doc_id) from exc
        return doc_id

    async def _stage_update(self, entity: T) -> tuple[Any, dict, Any]:
        """Read-check an update; return ``(ref, data, write_option)``.

        For versioned entities the stored ``version`` must match the
        entity's, and ``data`` carries the bumped version. The write option
        is ``None`` for unversioned entities.
        """
        doc_id = self._key(entity)
        ref = self._collection_ref().document(doc_id)
        snapshot = await ref.get()
        if not snapshot.exists:
            raise DocumentNotFoundError(self._collection_name, doc_id)
        self._before_update(self._hydrate(snapshot), entity)

        data = entity.to_firestore(exclude_none=False)
        data.pop(self._key_field, None)

        if not isinstance(entity, VersionedModel):
            return ref, data, None

        stored_version = snapshot.to_dict().get("version", 0)
        if stored_version != entity.version:
            logger.warning(
                "Stale write to %s/%s: version %s, stored %s",
                self._collection_name, doc_id, entity.version, stored_version,
            )
            raise ConcurrencyConflictError(
                self._collection_name, doc_id, entity.version, stored_version
            )

        data["version"] = entity.version + 1
        option = get_firestore_client().write_option(last_update_time=snapshot.update_time)
        return ref, data, option

    async def update(self, entity: T) -> None:
        """Write back a full entity.

        For versioned entities the stored ``version`` must match the
        entity's; on success the entity's version is bumped.
        """
        ref, data, option = await self._stage_update(entity)
        if option is None:
            await ref.set(data)
            return
        try:
            await ref.update(data, option=option)
        except FailedPrecondition as exc:
            doc_id = self._key(entity)
            logger.warning("Lost update race on %s/%s", self._collection_name, doc_id)
            raise ConcurrencyConflictError(
                self._collection_name, doc_id, entity.version, None
            ) from exc
        entity.version += 1

    async def delete(self, doc_id: str) -> None:
        """Delete a document."""
        await self._collection_ref().document(doc_id).delete()


async def update_together(*updates: tuple[BaseRepository, VersionedModel]) -> None:
    """Write several versioned entities in one batch: all land or none do.

    Every document gets its own ``last_update_time`` precondition, so a
    concurrent write to any of them fails the whole batch with
    ``ConcurrencyConflictError``. Versions are bumped only after commit.
    """
    db = get_firestore_client()
    batch = db.batch()
    for repo, entity in updates:
        ref, data, option = await repo._stage_update(entity)
        batch.update(ref, data, option=option)
    try:
        await batch.commit()
    except FailedPrecondition as exc:
        keys = [f"{repo._collection_name}/{repo._key(entity)}" for repo, entity in updates]
        logger.warning("Lost update race on batch %s", ", ".join(keys))
        repo, entity = updates[0]
        raise ConcurrencyConflictError(
            repo._collection_name, repo._key(entity), entity.version, None
        ) from exc
    for _, entity in updates:
        entity.version += 1
