"""Storage gateways."""

from .base import LedgerGateway, DocumentStore, DocumentEditor
from .google_sheets import GoogleSheetsLedger, QuotationLedger
from .google_drive import GoogleDriveStore
from .google_docs import GoogleDocsEditor
from .local_storage import LocalStorage

__all__ = [
    'LedgerGateway',
    'DocumentStore',
    'DocumentEditor',
    'GoogleSheetsLedger',
    'QuotationLedger',
    'GoogleDriveStore',
    'GoogleDocsEditor',
    'LocalStorage',
]
