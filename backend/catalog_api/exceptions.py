"""
Catalog API — Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for the persistence boundary.
How:   Each exception carries a message and an optional context dict.
       Create handlers catch PersistenceError and answer 400; anything
       else reaching the global handlers in main.py becomes a 500.
Who:   Raised by the document store; caught by the create handlers.

Exception Hierarchy:
    CatalogError (base)                  → 500 if it escapes a handler
    └── PersistenceError                 → 400 from the create handler
        ├── DocumentValidationError      (schema rejected the document)
        └── StorageError                 (driver or constraint failure)
"""

from typing import Any, Dict, List, Optional


class CatalogError(Exception):
    """
    Base exception for all Catalog API errors.

    Attributes:
        message:  Human-readable description (returned to the caller where
                  the resource contract says so)
        context:  Additional debug info (logged, never returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class PersistenceError(CatalogError):
    """
    Raised by the document store when a write fails.

    The create handlers never distinguish the subclasses: validation and
    storage failures collapse into the same 400 response carrying `message`.
    """

    def __init__(
        self,
        message: str = "Failed to persist document",
        resource: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource:
            ctx["resource"] = resource
        super().__init__(message=message, context=ctx)
        self.resource = resource


class DocumentValidationError(PersistenceError):
    """
    Raised when a document fails its resource schema.

    Carries the field-level reasons from the ValidationResult so callers
    that want structure (logs, tests) do not have to parse the message.

    Example message:
        "Book validation failed: title: Field required, author: Field required"
    """

    def __init__(
        self,
        message: str,
        resource: Optional[str] = None,
        field_errors: Optional[List[Any]] = None,
    ):
        self.field_errors = list(field_errors or [])
        super().__init__(
            message=message,
            resource=resource,
            context={"fields": [error.path for error in self.field_errors]},
        )


class StorageError(PersistenceError):
    """
    Raised when the database rejects or cannot complete a write.

    When:    Connection lost, constraint violation, driver error.
    Context: `original_error` holds the driver exception class name.
    """

    def __init__(
        self,
        message: str = "Document could not be saved",
        resource: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, resource=resource, context=context)
