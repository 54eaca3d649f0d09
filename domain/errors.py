class DomainError(Exception):
    """Base class for ledger errors that the session reports and recovers from."""


class EmptyLogError(DomainError):
    pass


class NothingToRedoError(DomainError):
    pass


class EmptyStructureError(DomainError):
    pass


class NotFoundError(DomainError):
    pass


class PersistenceError(DomainError):
    """Raised by storage backends when the data file cannot be read or written."""


class StoreNotInitializedError(RuntimeError):
    """Raised when a session is used before its store was opened."""
