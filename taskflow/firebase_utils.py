"""Loading of the Firebase service account used by the Admin SDK."""
import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Environment variables that may hold a service account file path, in order
CREDENTIAL_FILE_VARS = ('FIREBASE_CREDENTIALS_PATH', 'GOOGLE_APPLICATION_CREDENTIALS')


def _read_json_file(path: str) -> Optional[Dict[str, Any]]:
    if not path or not os.path.exists(path):
        return None
    with open(path, 'r') as f:
        return json.load(f)


def _credentials_from_env_vars() -> Optional[Dict[str, Any]]:
    """Build a service account dict from the individual FIREBASE_* variables.

    The private key is usually stored with escaped newlines, which are
    restored here.
    """
    project_id = os.getenv('FIREBASE_PROJECT_ID')
    private_key = os.getenv('FIREBASE_PRIVATE_KEY')
    client_email = os.getenv('FIREBASE_CLIENT_EMAIL')
    if not (project_id and private_key and client_email):
        return None
    return {
        "type": "service_account",
        "project_id": project_id,
        "private_key_id": os.getenv('FIREBASE_PRIVATE_KEY_ID'),
        "private_key": private_key.replace('\\n', '\n'),
        "client_email": client_email,
        "client_id": os.getenv('FIREBASE_CLIENT_ID'),
        "token_uri": "https://oauth2.googleapis.com/token",
    }


def get_firebase_credentials() -> Dict[str, Any]:
    """
    Load the Firebase service account.

    Sources, first match wins:
    1. FIREBASE_CREDENTIALS_JSON - inline JSON or a path to a JSON file
    2. FIREBASE_CREDENTIALS_PATH - path to a service account JSON file
    3. GOOGLE_APPLICATION_CREDENTIALS - path to a service account JSON file
    4. FIREBASE_PROJECT_ID + FIREBASE_CLIENT_EMAIL + FIREBASE_PRIVATE_KEY

    Raises:
        ValueError: If no source provides credentials
    """
    creds_json = os.getenv('FIREBASE_CREDENTIALS_JSON')
    if creds_json:
        try:
            return json.loads(creds_json)
        except json.JSONDecodeError:
            creds = _read_json_file(creds_json)
            if creds is not None:
                return creds
            logger.warning("FIREBASE_CREDENTIALS_JSON is neither JSON nor an existing file")

    for var in CREDENTIAL_FILE_VARS:
        creds = _read_json_file(os.getenv(var, ''))
        if creds is not None:
            return creds

    creds = _credentials_from_env_vars()
    if creds is not None:
        return creds

    raise ValueError(
        "Firebase credentials not found. Please set one of:\n"
        "1. FIREBASE_CREDENTIALS_JSON (JSON string or path to JSON file)\n"
        "2. FIREBASE_CREDENTIALS_PATH (path to service account JSON file)\n"
        "3. GOOGLE_APPLICATION_CREDENTIALS (path to service account JSON file)\n"
        "4. FIREBASE_PROJECT_ID, FIREBASE_CLIENT_EMAIL and FIREBASE_PRIVATE_KEY"
    )
