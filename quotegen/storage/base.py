"""Storage gateway interfaces.

The quote generator talks to three external services: a spreadsheet holding
the quotation log, a file store holding the generated documents, and a
document editor filling in the template placeholders. Each is reached through
one of the narrow interfaces below so that the generator can run against
in-memory implementations in tests.

Implementations:
    - GoogleSheetsLedger: Google Sheets v4
    - GoogleDriveStore: Google Drive v3
    - GoogleDocsEditor: Google Docs v1
"""

from abc import ABC, abstractmethod
from typing import List, Mapping, Tuple


class LedgerGateway(ABC):
    """Tabular resource recording one row per quotation."""

    @abstractmethod
    def ensure_table(self, sheet_name: str, headers: List[str]) -> int:
        """
        Make sure a sheet exists, creating it with a header row if needed.

        Args:
            sheet_name: Title of the sheet tab
            headers: Header cells written when the sheet is created

        Returns:
            Sheet id
        """

    @abstractmethod
    def read_last_cell(self, sheet_name: str) -> Tuple[int, str]:
        """
        Read the last non-empty cell of the first column.

        Args:
            sheet_name: Title of the sheet tab

        Returns:
            (1-based row number, cell value), or (0, "") if the column is empty
        """

    @abstractmethod
    def write_row(self, sheet_name: str, row_number: int, row: List[str]):
        """Write one row at a 1-based row number."""


class DocumentStore(ABC):
    """Hierarchical file storage."""

    @abstractmethod
    def find_or_create_folder(self, name: str, parent_id: str) -> str:
        """Return the id of folder ``name`` under ``parent_id``, creating it if missing."""

    @abstractmethod
    def copy_template(self, template_id: str, name: str, folder_id: str) -> str:
        """Copy a template document into a folder and return the copy's id."""

    @abstractmethod
    def export_pdf(self, document_id: str) -> bytes:
        """Export a document as PDF."""


class DocumentEditor(ABC):
    """Placeholder substitution inside a document."""

    @abstractmethod
    def substitute_placeholders(self, document_id: str, replacements: Mapping[str, str]) -> str:
        """
        Replace every occurrence of each placeholder with its value.

        Replacements are independent of each other and may be applied in
        any order.

        Returns:
            Id of the updated document
        """
