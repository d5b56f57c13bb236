import os
import json
from typing import Optional

import firebase_admin
from firebase_admin import credentials
from dotenv import load_dotenv

from src.models import ServiceAccount

# Load environment variables from the parent directory
dotenv_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), '.env')
load_dotenv(dotenv_path)

# Firebase configuration
PROJECT_ID = os.getenv("FIREBASE_PROJECT_ID", "workmate-gh")
DATABASE_URL = os.getenv("FIREBASE_DATABASE_URL", f"https://{PROJECT_ID}.firebaseio.com")
SERVICE_ACCOUNT_PATH = os.getenv("FIREBASE_SERVICE_ACCOUNT", None)

def load_service_account() -> ServiceAccount:
    """Build the service-account record from a key file or from inline environment fields."""
    if SERVICE_ACCOUNT_PATH and os.path.exists(SERVICE_ACCOUNT_PATH):
        print(f"Loading service account from: {SERVICE_ACCOUNT_PATH}")
        with open(SERVICE_ACCOUNT_PATH, 'r') as f:
            return ServiceAccount.from_dict(json.load(f))
    if SERVICE_ACCOUNT_PATH:
        print(f"Service account file not found: {SERVICE_ACCOUNT_PATH}, using FIREBASE_* environment fields")

    # Keys pasted into .env usually carry literal \n sequences
    private_key = os.getenv("FIREBASE_PRIVATE_KEY", "").replace("\\n", "\n")

    return ServiceAccount(
        project_id=PROJECT_ID,
        private_key_id=os.getenv("FIREBASE_PRIVATE_KEY_ID", ""),
        private_key=private_key,
        client_email=os.getenv("FIREBASE_CLIENT_EMAIL", ""),
        client_id=os.getenv("FIREBASE_CLIENT_ID", "")
    )

def initialize_firebase(
    service_account: ServiceAccount,
    database_url: str = DATABASE_URL,
    name: Optional[str] = None
) -> firebase_admin.App:
    """Initialize Firebase Admin SDK with the given service account.

    An app that is already registered under ``name`` is returned as is.
    Credential errors are raised to the caller.
    """
    print("\n=== FIREBASE INITIALIZATION ===")
    print(f"Project ID: {service_account.project_id}")
    print(f"Database URL: {database_url}")

    # Check if app is already initialized
    try:
        app = firebase_admin.get_app(name) if name else firebase_admin.get_app()
        print("Firebase app already initialized")
        return app
    except ValueError:
        pass  # App not initialized yet

    cred = credentials.Certificate(service_account.to_dict())
    options = {
        'databaseURL': database_url,
        'projectId': service_account.project_id,
    }
    if name:
        app = firebase_admin.initialize_app(cred, options, name=name)
    else:
        app = firebase_admin.initialize_app(cred, options)

    print("Firebase initialized successfully")
    print("================================\n")
    return app
