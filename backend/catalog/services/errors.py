"""Exceptions raised by catalog services and mapped to 400 responses."""


class CatalogError(Exception):
    """Base class for request-level catalog failures."""


class DuplicateError(CatalogError):
    """A record with the same identifying name already exists."""


class MissingFieldError(CatalogError):
    """A field required by the selected operation was not supplied."""
