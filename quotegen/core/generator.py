"""Quote generation pipeline."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Optional

from .config import QuoteConfig
from .fields import build_replacements
from ..storage.base import DocumentEditor, DocumentStore, LedgerGateway
from ..storage.google_sheets import QuotationLedger
from ..storage.local_storage import LocalStorage
from ..utils.email_utils import EmailUtils


@dataclass
class QuoteResult:
    """Outcome of one quote generation run."""
    quote: str
    folder_id: str
    document_id: str
    pdf_path: str
    replacements: Dict[str, str] = field(default_factory=dict)


class QuoteGenerator:
    """
    Generate one quotation document.

    Steps, each aborting the run on failure:
        1. Build placeholder replacements from the input data
        2. Log the quotation and allocate its number
        3. Find or create the customer folder
        4. Copy the template into it and fill the placeholders
        5. Export the copy as PDF and save it locally

    Remote resources created before a failure are left in place.
    """

    def __init__(
        self,
        config: QuoteConfig,
        ledger: LedgerGateway,
        store: DocumentStore,
        editor: DocumentEditor,
        local_storage: Optional[LocalStorage] = None
    ):
        self.config = config
        self.ledger = QuotationLedger(ledger)
        self.store = store
        self.editor = editor
        self.local_storage = local_storage or LocalStorage()

    @staticmethod
    def document_name(folder_name: str, quote: str) -> str:
        """Name of the generated document, e.g. ``example.com QUOTE #AC2407006``."""
        return f"{folder_name} QUOTE #{quote}"

    def generate(self, now: Optional[datetime] = None) -> QuoteResult:
        """
        Run the pipeline.

        Args:
            now: Preparation time (defaults to the current UTC time)

        Returns:
            QuoteResult describing what was created
        """
        self.config.validate()
        now = now or datetime.now(timezone.utc)
        template_id = self.config.template_id

        replacements = build_replacements(self.config.data, now)
        email = replacements["{{email}}"]

        row = QuotationLedger.build_row(replacements, template_id)
        quote = self.ledger.log_quotation(row, now)
        replacements["{{quote}}"] = quote

        folder_name = EmailUtils.folder_name(email)
        folder_id = self.store.find_or_create_folder(folder_name, self.config.parent_folder_id)
        print(f"✓ Using domain folder id: {folder_id}")

        doc_name = self.document_name(folder_name, quote)
        copy_id = self.store.copy_template(template_id, doc_name, folder_id)
        print(f"✓ Copied template to doc id: {copy_id}")

        document_id = self.editor.substitute_placeholders(copy_id, replacements)
        content = self.store.export_pdf(document_id)
        pdf_path = self.local_storage.save_pdf(content, self.config.out_dir, folder_name, doc_name)

        return QuoteResult(
            quote=quote,
            folder_id=folder_id,
            document_id=document_id,
            pdf_path=pdf_path,
            replacements=replacements
        )
