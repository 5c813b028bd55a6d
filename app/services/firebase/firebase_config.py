"""Firebase Admin SDK initialization"""

import logging
import os

import firebase_admin
from firebase_admin import credentials, firestore

from app.config import Settings

logger = logging.getLogger(__name__)


def get_credentials(settings: Settings) -> credentials.Base:
    """
    Resolve Firebase credentials.

    Uses the service account file when configured, otherwise Google
    application default credentials (as on Cloud Run / Cloud Functions).

    Raises:
        FileNotFoundError: If a configured credentials file does not exist
    """
    cred_file = settings.firebase_credentials_file
    if not cred_file:
        logger.info("Using application default credentials for Firebase")
        return credentials.ApplicationDefault()

    if not os.path.exists(cred_file):
        raise FileNotFoundError(
            f"Firebase credentials file not found: {cred_file}. "
            "Please provide a valid Firebase service account JSON file."
        )

    return credentials.Certificate(cred_file)


def initialize_firebase(settings: Settings) -> firebase_admin.App:
    """
    Initialize the Firebase Admin SDK.

    Called once at application startup; the returned app is passed to
    the verifier and store explicitly.

    Returns:
        firebase_admin.App: The initialized Firebase app instance
    """
    options = {}
    if settings.firebase_project_id:
        options["projectId"] = settings.firebase_project_id

    try:
        firebase_app = firebase_admin.initialize_app(get_credentials(settings), options)
    except Exception as e:
        logger.error(f"Failed to initialize Firebase: {e}")
        raise

    logger.info(f"Firebase initialized (project={firebase_app.project_id})")
    return firebase_app


def create_firestore_client(firebase_app: firebase_admin.App):
    """Create the Firestore client bound to ``firebase_app``."""
    return firestore.client(app=firebase_app)
