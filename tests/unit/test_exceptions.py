"""Unit tests for domain exceptions."""

import pytest

from webterms.domain.exceptions import (
    ActivePublicationExists,
    ConflictError,
    ConversionError,
    DuplicateDocument,
    InvalidTransition,
    NotFound,
    PublicationError,
    StorageError,
    ValidationError,
    WebtermsError,
)


@pytest.mark.parametrize(
    "exc_type",
    [
        ValidationError,
        NotFound,
        ConflictError,
        ConversionError,
        PublicationError,
        StorageError,
    ],
)
def test_inherits_webterms_error(exc_type) -> None:
    assert issubclass(exc_type, WebtermsError)


@pytest.mark.parametrize(
    "exc_type", [DuplicateDocument, ActivePublicationExists, InvalidTransition]
)
def test_conflicts_inherit_conflict_error(exc_type) -> None:
    assert issubclass(exc_type, ConflictError)


def test_not_found_message() -> None:
    """NotFound has entity and entity_id."""
    exc = NotFound("Document", "abc-123")
    assert exc.entity == "Document"
    assert exc.entity_id == "abc-123"
    assert str(exc) == "Document not found: abc-123"


def test_validation_error_field() -> None:
    exc = ValidationError("lang is required", field="lang")
    assert exc.field == "lang"
    assert str(exc) == "lang is required"


def test_duplicate_document_carries_existing_id() -> None:
    exc = DuplicateDocument("Duplicate document content", entity_id="doc-1")
    assert exc.entity_id == "doc-1"
