"""Local copies of exported quotes."""

import os


class LocalStorage:
    """Save exported quote PDFs on disk."""

    @staticmethod
    def pdf_path(out_dir: str, folder_name: str, doc_name: str) -> str:
        """Path of a quote PDF: ``<out_dir>/<folder_name>/<doc_name>.pdf``."""
        return os.path.join(out_dir, folder_name, doc_name + '.pdf')

    @staticmethod
    def save_pdf(content: bytes, out_dir: str, folder_name: str, doc_name: str) -> str:
        """
        Write a PDF, creating its folder if needed.

        Args:
            content: PDF bytes
            out_dir: Root directory for quotes
            folder_name: Customer folder name
            doc_name: Document name without extension

        Returns:
            Path of the written file
        """
        filepath = LocalStorage.pdf_path(out_dir, folder_name, doc_name)
        os.makedirs(os.path.dirname(filepath), exist_ok=True)

        print(f"✓ Writing file: {filepath}")
        with open(filepath, 'wb') as f:
            f.write(content)
        return filepath
