"""
ActivityHive Backend — Custom Exception Hierarchy
==================================================

What:  Application-specific exceptions for the different failure classes.
How:   Each exception carries a fixed, client-safe message and an optional
       context dict. Global exception handlers (registered in main.py) turn
       them into plain-text responses with the matching status code.
Who:   Raised by dependencies and services; caught by global handlers.

Exception Hierarchy:
    ActivityHiveError (base)
    ├── ValidationError          → 400 Bad Request
    ├── InvalidCollectionError   → 400 Bad Request
    ├── NotFoundError            → 404 Not Found
    ├── DatabaseError            → 500 Internal Server Error
    └── StoreConnectionError     → startup only, terminates the process

The `context` dict is for server-side logs. It is never part of a response.
"""

from typing import Any, Dict, Optional


class ActivityHiveError(Exception):
    """
    Base exception for all ActivityHive application errors.

    Attributes:
        message:  Client-facing error text (safe to return in a response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ActivityHiveError):
    """
    Raised when a request body fails a shape check.

    When:    Missing body, malformed JSON, missing/empty required fields,
             wrong field types.
    HTTP:    400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Invalid request data",
        errors: Optional[list] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if errors:
            ctx["errors"] = errors
        super().__init__(message=message, context=ctx)
        self.errors = errors or []


class InvalidCollectionError(ActivityHiveError):
    """
    Raised when the driver refuses a collection name from the URL.

    HTTP:    400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        collection_name: str = "",
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["collection_name"] = collection_name
        if reason:
            ctx["reason"] = reason
        super().__init__(message="Invalid collection name", context=ctx)
        self.collection_name = collection_name


class NotFoundError(ActivityHiveError):
    """
    Raised when a requested document does not exist.

    When:    PUT /api/products/{id} with an id that matches no product.
    HTTP:    404 Not Found
    """

    status_code = 404

    def __init__(
        self,
        message: str = "Not found",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(ActivityHiveError):
    """
    Raised when a store operation fails.

    When:    Connection lost mid-operation, server-side rejection of a write,
             cursor failures while enumerating documents.
    HTTP:    500 Internal Server Error

    The message returned to the client is always the fixed per-operation
    text. The driver error is recorded in `context` and logged only.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StoreConnectionError(ActivityHiveError):
    """
    Raised when the initial connection to MongoDB cannot be established.

    Not mapped to a response: the lifespan lets it propagate, which stops
    uvicorn before it starts serving.
    """

    def __init__(
        self,
        message: str = "Could not connect to the document store",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
