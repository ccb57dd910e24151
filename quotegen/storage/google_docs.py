"""Google Docs placeholder substitution."""

from typing import Dict, List, Mapping

from googleapiclient.errors import HttpError

from .base import DocumentEditor


class GoogleDocsEditor(DocumentEditor):
    """Fill ``{{placeholder}}`` tokens in a Google Doc."""

    def __init__(self, service):
        """
        Args:
            service: Docs v1 client from googleapiclient.discovery.build
        """
        self.service = service

    @staticmethod
    def build_requests(replacements: Mapping[str, str]) -> List[Dict]:
        """One case-sensitive replaceAllText request per placeholder."""
        # https://developers.google.com/docs/api/how-tos/merge
        return [
            {
                'replaceAllText': {
                    'containsText': {'text': key, 'matchCase': True},
                    'replaceText': value
                }
            }
            for key, value in replacements.items()
        ]

    def substitute_placeholders(self, document_id: str, replacements: Mapping[str, str]) -> str:
        requests = self.build_requests(replacements)
        if not requests:
            return document_id

        try:
            response = self.service.documents().batchUpdate(
                documentId=document_id,
                body={'requests': requests}
            ).execute()
        except HttpError as e:
            print(f"✗ Failed to fill placeholders in {document_id}: {e}")
            raise

        return response.get('documentId', document_id)
