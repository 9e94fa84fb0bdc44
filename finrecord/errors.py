"""Error taxonomy for the record processing handlers.

Every failure a handler can surface derives from RecordProcessingError and
carries the HTTP status it maps to. Schema validation failures are not in
this list: they are reported as a structured 400 response, never raised.
"""

from typing import Any, Dict


class RecordProcessingError(Exception):
    """Base class for all handler failures."""

    status_code = 500

    def __init__(self, message: str, **extra: Any) -> None:
        super().__init__(message)
        self.message = message
        self.extra = extra

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message, **self.extra}


class MalformedBodyError(RecordProcessingError):
    """Request body is not parseable JSON."""

    status_code = 400


class MissingFieldError(RecordProcessingError):
    """A field required mid-pipeline is absent or null."""

    status_code = 400

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field '{field}'", field=field)
        self.field = field


class InvalidFieldError(RecordProcessingError):
    """A field is present but has the wrong type."""

    status_code = 400

    def __init__(self, field: str, expected: str) -> None:
        super().__init__(f"Field '{field}' must be a {expected}", field=field)
        self.field = field


class DecryptionError(RecordProcessingError):
    status_code = 400


class PathTraversalError(RecordProcessingError):
    """Filename would resolve outside the storage directory."""

    status_code = 400

    def __init__(self, filename: str) -> None:
        super().__init__(f"Unsafe file path '{filename}'", filePath=filename)
        self.filename = filename


class NotFoundError(RecordProcessingError):
    status_code = 404

    def __init__(self, filename: str) -> None:
        super().__init__(f"File '{filename}' not found", filePath=filename)
        self.filename = filename


class StorageError(RecordProcessingError):
    """Underlying filesystem operation failed."""

    status_code = 500
