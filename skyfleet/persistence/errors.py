"""Persistence-specific exceptions."""


class PersistenceError(Exception):
    """Base exception for all persistence errors."""


class DocumentNotFoundError(PersistenceError):
    """Raised when a Firestore document does not exist."""

    def __init__(self, collection: str, doc_id: str):
        self.collection = collection
        self.doc_id = doc_id
        super().__init__(f"{collection}/{doc_id} not found")


class DocumentAlreadyExistsError(PersistenceError):
    """Raised when creating a document under a key that is already taken."""

    def __init__(self, collection: str, doc_id: str):
        self.collection = collection
        self.doc_id = doc_id
        super().__init__(f"{collection}/{doc_id} already exists")


class ConcurrencyConflictError(PersistenceError):
    """Raised when a document changed since it was read (stale version)."""

    def __init__(self, collection: str, doc_id: str, expected: int, actual: int | None):
        self.collection = collection
        self.doc_id = doc_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{collection}/{doc_id} was modified concurrently "
            f"(expected version {expected}, found {actual})"
        )
