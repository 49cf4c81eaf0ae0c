"""Domain exceptions."""


class WebtermsError(Exception):
    """Base exception for webterms."""

    pass


class ValidationError(WebtermsError):
    """Validation failed for input data."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class NotFound(WebtermsError):
    """Requested resource was not found."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(WebtermsError):
    """Operation conflicts with an existing entity."""

    def __init__(self, message: str, entity_id: str | None = None) -> None:
        super().__init__(message)
        self.entity_id = entity_id


class DuplicateDocument(ConflictError):
    """Document with same content already exists in the scope."""

    pass


class ActivePublicationExists(ConflictError):
    """Document already has a queued, running or open publication job."""

    pass


class InvalidTransition(ConflictError):
    """Publication job cannot move to the requested status."""

    pass


class ConversionError(WebtermsError):
    """Source file could not be converted to PDF."""

    pass


class PublicationError(WebtermsError):
    """Publishing to the public repository failed."""

    pass


class StorageError(WebtermsError):
    """Reading or writing persisted data failed."""

    pass
