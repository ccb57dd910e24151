"""Configuration management for the quote generator."""

import json
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from dotenv import load_dotenv

load_dotenv()


# Short names for the pricing templates kept in Google Docs
TEMPLATE_ALIASES: Dict[str, str] = {
    "stash-50": "1EXMmcztXGb-EOrebHCrPrhFwQuRB0RpTl0UVeMtcMNk",
    "stash-100": "1Y2z7UZIIuvF3Twka6tXoovkbxyxXXz4qLnr9W43BIFs",
    "kubedb-30": "1n8zRoI5qjBaqa5hrogAey8OFd8-q7nCE9ysxwullb0g",
    "kubedb-40": "1s5751cd1SWZAy824njvTz2-iSC4V7NXRoFoCmZfoIcQ",
    "kubedb-45": "1VN3C_fDdUG_-zgFwvPkASVYzVmVr9E2Scv1Z2uqBRrY",
    "kubedb-cluster-edu": "18niPAUxB0OzsWTSln2OYuMqlXvHidozquqVwhtaFKYg",
}


class ConfigurationError(Exception):
    """Raised when a required setting or input field is missing."""


def load_template_aliases(path: Optional[str] = None) -> Dict[str, str]:
    """
    Built-in template aliases, extended by a JSON file if one is configured.

    Args:
        path: JSON object mapping alias to document id. Defaults to the
            QUOTEGEN_TEMPLATE_ALIASES environment variable.

    Returns:
        Alias table
    """
    aliases = dict(TEMPLATE_ALIASES)
    path = path or os.getenv("QUOTEGEN_TEMPLATE_ALIASES")
    if path:
        with open(path, 'r', encoding='utf-8') as f:
            try:
                extra = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"template alias file {path} is not valid JSON: {e}")
        if not isinstance(extra, dict):
            raise ConfigurationError(f"template alias file {path} must hold a JSON object")
        aliases.update({str(k): str(v) for k, v in extra.items()})
    return aliases


@dataclass
class QuoteConfig:
    """Configuration for one quote generation run."""

    # Google Drive folder holding one sub-folder per customer domain
    parent_folder_id: Optional[str] = None

    # Template document id or alias
    template_doc_id: Optional[str] = None

    # Local directory root for exported PDFs
    out_dir: Optional[str] = None

    # Raw --data key/value pairs
    data: Dict[str, str] = field(default_factory=dict)

    # Spreadsheet holding the quotation log
    spreadsheet_id: Optional[str] = None

    # Google credentials
    credentials_file: Optional[str] = None
    token_file: Optional[str] = None

    template_aliases: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Fill unset values from environment variables."""
        self.parent_folder_id = self.parent_folder_id or os.getenv("QUOTEGEN_PARENT_FOLDER_ID")
        self.spreadsheet_id = self.spreadsheet_id or os.getenv("QUOTEGEN_SPREADSHEET_ID")
        self.out_dir = self.out_dir or os.getenv("QUOTEGEN_OUT_DIR") or "quotes"
        self.credentials_file = (
            self.credentials_file or
            os.getenv("QUOTEGEN_CREDENTIALS_FILE") or
            "credentials.json"
        )
        self.token_file = self.token_file or os.getenv("QUOTEGEN_TOKEN_FILE") or "token.json"
        if not self.template_aliases:
            self.template_aliases = load_template_aliases()

    @property
    def template_id(self) -> Optional[str]:
        """Template document id with aliases resolved."""
        if self.template_doc_id is None:
            return None
        return self.template_aliases.get(self.template_doc_id, self.template_doc_id)

    def missing(self) -> List[str]:
        """Names of required settings that are not set."""
        required = {
            "parent folder id": self.parent_folder_id,
            "template doc id": self.template_doc_id,
            "spreadsheet id": self.spreadsheet_id,
        }
        return [name for name, value in required.items() if not value]

    def validate(self):
        """
        Validate configuration.

        Raises:
            ConfigurationError: if a required setting is missing
        """
        missing = self.missing()
        if missing:
            raise ConfigurationError("missing " + ", ".join(missing))
