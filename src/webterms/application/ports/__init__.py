"""Application ports - interfaces for external adapters."""

from webterms.application.ports.blob_storage import BlobStorage
from webterms.application.ports.converter import Converter
from webterms.application.ports.publisher import Publisher
from webterms.application.ports.session_store import SessionStore
from webterms.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "BlobStorage",
    "Converter",
    "Publisher",
    "SessionStore",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
