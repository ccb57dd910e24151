"""Google API authentication and client construction."""

import json
import os

from google.auth.transport.requests import Request
from google.oauth2 import credentials as user_credentials
from google.oauth2 import service_account
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build

from ..core.config import ConfigurationError

# If modifying these scopes, delete the cached token file.
SCOPES = [
    'https://www.googleapis.com/auth/documents',
    'https://www.googleapis.com/auth/drive',
    'https://www.googleapis.com/auth/spreadsheets',
]


def _load_user_token(token_file: str):
    """Cached user credentials, refreshed if expired. None if unusable."""
    if not os.path.exists(token_file):
        return None

    try:
        creds = user_credentials.Credentials.from_authorized_user_file(token_file, SCOPES)
    except ValueError as e:
        raise ConfigurationError(f"token file {token_file} is not a valid OAuth token: {e}")
    if creds.valid:
        return creds
    if creds.expired and creds.refresh_token:
        creds.refresh(Request())
        save_token(token_file, creds)
        return creds
    return None


def _service_account(info, source: str):
    """Service account credentials from a parsed key."""
    if not isinstance(info, dict):
        raise ConfigurationError(f"{source} must hold a JSON object")
    try:
        creds = service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
    except ValueError as e:
        raise ConfigurationError(f"{source} is not a valid service account key: {e}")
    print(f"✓ Google APIs authenticated from {source}")
    return creds


def save_token(token_file: str, creds):
    """Cache user credentials, readable by the owner only."""
    print(f"✓ Saving credential file to: {token_file}")
    fd = os.open(token_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, 'w', encoding='utf-8') as f:
        f.write(creds.to_json())


def get_credentials(credentials_file: str = 'credentials.json', token_file: str = 'token.json'):
    """
    Load Google credentials.

    Looked up in order:
        1. GOOGLE_CREDS_JSON environment variable holding a service account key
        2. Cached user token in ``token_file``
        3. ``credentials_file``: a service account key is used directly, an
           OAuth client secret starts the browser consent flow and the
           resulting token is cached in ``token_file``

    Args:
        credentials_file: Service account key or OAuth client secret
        token_file: Cached user token

    Returns:
        google.auth credentials

    Raises:
        ConfigurationError: if no credentials can be found or they are malformed
    """
    creds_json_str = os.getenv('GOOGLE_CREDS_JSON')
    if creds_json_str:
        try:
            info = json.loads(creds_json_str)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"GOOGLE_CREDS_JSON is not valid JSON: {e}")
        return _service_account(info, "GOOGLE_CREDS_JSON")

    creds = _load_user_token(token_file)
    if creds:
        return creds

    if not os.path.exists(credentials_file):
        raise ConfigurationError(
            f"Google credentials not found: set GOOGLE_CREDS_JSON or provide {credentials_file}"
        )

    with open(credentials_file, 'r', encoding='utf-8') as f:
        try:
            info = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"{credentials_file} is not valid JSON: {e}")
    if not isinstance(info, dict):
        raise ConfigurationError(f"{credentials_file} must hold a JSON object")

    if info.get('type') == 'service_account':
        return _service_account(info, credentials_file)

    try:
        flow = InstalledAppFlow.from_client_config(info, SCOPES)
    except ValueError as e:
        raise ConfigurationError(f"{credentials_file} is not a service account key or OAuth client secret: {e}")
    creds = flow.run_local_server(port=0)
    save_token(token_file, creds)
    return creds


def build_services(creds):
    """
    Build the Sheets, Drive and Docs clients.

    Returns:
        (sheets, drive, docs) service objects
    """
    sheets = build('sheets', 'v4', credentials=creds, cache_discovery=False)
    drive = build('drive', 'v3', credentials=creds, cache_discovery=False)
    docs = build('docs', 'v1', credentials=creds, cache_discovery=False)
    return sheets, drive, docs
