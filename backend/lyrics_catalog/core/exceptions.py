"""Error taxonomy shared by the song store and the HTTP layer.

Each error carries the message shown to API clients and the status code it
is answered with. Storage failures always expose the same generic message;
the underlying cause is kept on ``__cause__`` for logging only.
"""


class CatalogError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(CatalogError):
    """A required song field was missing or blank."""
    status_code = 400
    message = "Title and artist are required"


class NotFoundError(CatalogError):
    """The requested id does not resolve to any song."""
    status_code = 404
    message = "Song not found"


class StorageError(CatalogError):
    """The database was unreachable or rejected the operation."""
    status_code = 500
    message = "Internal server error"
