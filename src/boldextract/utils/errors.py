"""Typed exceptions for document validation, archive access and XML parsing."""


class DocumentError(ValueError):
    """Base class for errors raised while processing a document."""


class InvalidExtensionError(DocumentError):
    """Raised when a path does not carry the extension a parser expects."""


class ArchiveError(DocumentError):
    """Base class for container related errors."""


class ContainerOpenError(ArchiveError):
    """Raised when a container is missing, unreadable or not a zip file."""


class EntryNotFoundError(ArchiveError):
    """Raised when the requested entry is absent from a container."""


class MalformedXmlError(DocumentError):
    """Raised when an archive entry is not well-formed XML."""
