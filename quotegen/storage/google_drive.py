"""Google Drive storage for generated quotes."""

from googleapiclient.errors import HttpError

from .base import DocumentStore

FOLDER_MIME_TYPE = 'application/vnd.google-apps.folder'
PDF_MIME_TYPE = 'application/pdf'


class GoogleDriveStore(DocumentStore):
    """Customer folders, template copies and PDF export on Google Drive."""

    def __init__(self, service):
        """
        Args:
            service: Drive v3 client from googleapiclient.discovery.build
        """
        self.service = service

    def find_folder(self, name: str, parent_id: str):
        """
        Search for a folder by name under a parent.

        Args:
            name: Folder name
            parent_id: Parent folder id

        Returns:
            Folder id or None if not found
        """
        # https://developers.google.com/drive/api/v3/search-files
        escaped = name.replace('\\', '\\\\').replace("'", "\\'")
        query = (
            f"name = '{escaped}' and mimeType = '{FOLDER_MIME_TYPE}' "
            f"and '{parent_id}' in parents and trashed = false"
        )
        result = self.service.files().list(
            q=query,
            spaces='drive',
            fields='files(id, name)'
        ).execute()

        files = result.get('files', [])
        if files:
            return files[0]['id']
        return None

    def find_or_create_folder(self, name: str, parent_id: str) -> str:
        try:
            folder_id = self.find_folder(name, parent_id)
            if folder_id:
                return folder_id

            metadata = {
                'name': name,
                'mimeType': FOLDER_MIME_TYPE,
                'parents': [parent_id]
            }
            folder = self.service.files().create(
                body=metadata,
                fields='id'
            ).execute()
            print(f"✓ Created folder: '{name}'")
            return folder['id']

        except HttpError as e:
            print(f"✗ Failed to find or create folder '{name}': {e}")
            raise

    def copy_template(self, template_id: str, name: str, folder_id: str) -> str:
        try:
            copied = self.service.files().copy(
                fileId=template_id,
                body={'name': name, 'parents': [folder_id]},
                fields='id, parents'
            ).execute()
            return copied['id']
        except HttpError as e:
            print(f"✗ Failed to copy template {template_id}: {e}")
            raise

    def export_pdf(self, document_id: str) -> bytes:
        try:
            return self.service.files().export(
                fileId=document_id,
                mimeType=PDF_MIME_TYPE
            ).execute()
        except HttpError as e:
            print(f"✗ Failed to export {document_id} as PDF: {e}")
            raise
