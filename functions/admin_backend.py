"""
Firebase Admin clients shared by the admin tools.

CLI scripts use the service account key stored beside them; the Cloud Function
relies on the credentials injected by the runtime. Either way the clients are
built once per process and handed to each operation as an AdminBackend.
"""
import logging
import os
import sys
from dataclasses import dataclass
from typing import Any

# Service account key path (serviceAccountKey.json in this folder)
KEY_PATH = os.environ.get("SERVICE_ACCOUNT_KEY") or os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "serviceAccountKey.json"
)
PROJECT_ID = os.environ.get("FIREBASE_PROJECT_ID", "longeviva-app")
# The create script prints the password back as a receipt for the operator
SHOW_PASSWORD_RECEIPT = os.environ.get("SHOW_PASSWORD_RECEIPT", "1") == "1"
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

ADMIN_PROFILES = "admin_profiles"
ADMINS = "admins"

logger = logging.getLogger(__name__)


@dataclass
class AdminBackend:
    auth: Any
    db: Any
    server_timestamp: Any


def _from_default_app():
    from firebase_admin import auth, firestore
    return AdminBackend(
        auth=auth,
        db=firestore.client(),
        server_timestamp=firestore.SERVER_TIMESTAMP,
    )


def open_script_backend(key_path=KEY_PATH, project_id=PROJECT_ID):
    """Backend for the CLI tools. Exits with status 1 when the key file is missing."""
    if not os.path.isfile(key_path):
        print("Chiave del service account non trovata.")
        print("Console Firebase > Impostazioni progetto > Account di servizio > 'Genera nuova chiave privata'")
        print(f"Salva il file JSON scaricato in {key_path}")
        sys.exit(1)
    os.environ.setdefault("GOOGLE_APPLICATION_CREDENTIALS", key_path)
    import firebase_admin
    from firebase_admin import credentials
    if not firebase_admin._apps:
        firebase_admin.initialize_app(credentials.Certificate(key_path), {"projectId": project_id})
        logger.info("firebase admin initialized: project=%s", project_id)
    return _from_default_app()


# Lazy init: keeps firebase_admin out of the deploy discovery import path
_backend = None


def get_backend():
    """Request-independent backend for the Cloud Function (ambient credentials)."""
    global _backend
    if _backend is None:
        import firebase_admin
        if not firebase_admin._apps:
            firebase_admin.initialize_app()
        _backend = _from_default_app()
    return _backend


def configure_logging():
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
