"""Exceptions raised while generating operation documents.

Every error here is fatal to a generator run: nothing in the pipeline
recovers locally, and files written before the failure stay on disk.
"""


class GenerationError(Exception):
    """Base class for all generator failures."""


class SchemaFetchError(GenerationError):
    """Raised when the introspection document cannot be fetched or decoded."""

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        if source:
            message = f"{message} (source: {source})"
        super().__init__(message)


class UnknownKindError(GenerationError):
    """Raised when a type reference uses a kind the resolver does not handle."""

    def __init__(self, kind: str | None, name: str | None = None):
        self.kind = kind
        self.name = name
        super().__init__(f"Unknown type {name} {kind}")


class FileWriteError(GenerationError):
    """Raised when an operation document cannot be written."""

    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write {path}: {cause}")
