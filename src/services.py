from typing import List, Optional

import firebase_admin
from firebase_admin import firestore, auth

from config.firebase_config import initialize_firebase, DATABASE_URL
from src.models import ServiceAccount, AuthUser, ConnectionReport

# Upper bound accepted by the Auth listUsers API
MAX_LIST_USERS = 1000

class FirebaseConnectionTester:
    """Read-only connectivity check against Firestore and Firebase Auth."""

    def __init__(
        self,
        service_account: ServiceAccount,
        database_url: str = DATABASE_URL,
        app_name: Optional[str] = None
    ):
        self.service_account = service_account
        self.database_url = database_url
        self.app_name = app_name
        self.app: Optional[firebase_admin.App] = None

    def initialize(self) -> firebase_admin.App:
        """Initialize the Firebase app on first use."""
        if self.app is None:
            self.app = initialize_firebase(self.service_account, self.database_url, self.app_name)
        return self.app

    def check_firestore(self, collection: str = 'users', limit: int = 1) -> int:
        """Fetch at most ``limit`` documents from ``collection`` and return how many came back."""
        if limit < 1:
            raise ValueError(f"Document limit must be positive, got {limit}")

        db = firestore.client(app=self.initialize())
        docs = db.collection(collection).limit(limit).get()
        return len(docs)

    def check_auth(self, max_results: int = 10) -> List[AuthUser]:
        """List up to ``max_results`` Firebase Auth users."""
        if not 1 <= max_results <= MAX_LIST_USERS:
            raise ValueError(f"max_results must be between 1 and {MAX_LIST_USERS}, got {max_results}")

        page = auth.list_users(max_results=max_results, app=self.initialize())
        return [AuthUser.from_record(user) for user in page.users]

    def run(self, collection: str = 'users', limit: int = 1, max_results: int = 10) -> ConnectionReport:
        """
        Run both checks in order and print the outcome.

        Any failure, whether in credentials, network, permissions or quota,
        ends the run with a single failure line. Nothing is retried.

        Args:
            collection: Firestore collection to read from
            limit: Maximum number of documents to fetch
            max_results: Maximum number of Auth users to list

        Returns:
            ConnectionReport describing what succeeded before any failure
        """
        report = ConnectionReport()

        try:
            report.documents_found = self.check_firestore(collection, limit)
            report.firestore_ok = True
            print("Firestore connection successful")
            print(f"Users found: {report.documents_found}")

            report.users = self.check_auth(max_results)
            report.auth_ok = True
            print("Auth connection successful")
            print(f"Total users: {len(report.users)}")

            for user in report.users:
                print(f"User: {user.email} UID: {user.uid}")

        except Exception as e:
            report.error = str(e)
            print(f"Firebase test failed: {e}")

        return report
