from typing import List, Dict, Any, Optional

DEFAULT_AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
DEFAULT_TOKEN_URI = "https://oauth2.googleapis.com/token"
DEFAULT_CERT_URL = "https://www.googleapis.com/oauth2/v1/certs"

class ServiceAccount:
    def __init__(
        self,
        project_id: str,
        private_key_id: str = "",
        private_key: str = "",
        client_email: str = "",
        client_id: str = "",
        auth_uri: str = DEFAULT_AUTH_URI,
        token_uri: str = DEFAULT_TOKEN_URI,
        auth_provider_x509_cert_url: str = DEFAULT_CERT_URL,
        type: str = "service_account"
    ):
        self.type = type
        self.project_id = project_id
        self.private_key_id = private_key_id
        self.private_key = private_key
        self.client_email = client_email
        self.client_id = client_id
        self.auth_uri = auth_uri
        self.token_uri = token_uri
        self.auth_provider_x509_cert_url = auth_provider_x509_cert_url

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ServiceAccount':
        """Create ServiceAccount from a service-account key file mapping"""
        return cls(
            type=data.get('type', 'service_account'),
            project_id=data.get('project_id', ''),
            private_key_id=data.get('private_key_id', ''),
            private_key=data.get('private_key', ''),
            client_email=data.get('client_email', ''),
            client_id=data.get('client_id', ''),
            auth_uri=data.get('auth_uri', DEFAULT_AUTH_URI),
            token_uri=data.get('token_uri', DEFAULT_TOKEN_URI),
            auth_provider_x509_cert_url=data.get('auth_provider_x509_cert_url', DEFAULT_CERT_URL)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert ServiceAccount to the mapping credentials.Certificate expects"""
        return {
            'type': self.type,
            'project_id': self.project_id,
            'private_key_id': self.private_key_id,
            'private_key': self.private_key,
            'client_email': self.client_email,
            'client_id': self.client_id,
            'auth_uri': self.auth_uri,
            'token_uri': self.token_uri,
            'auth_provider_x509_cert_url': self.auth_provider_x509_cert_url
        }

    @property
    def is_complete(self) -> bool:
        """Check that the key material needed to sign tokens is present"""
        return bool(self.private_key and self.client_email and self.private_key_id)

class AuthUser:
    def __init__(self, uid: str, email: Optional[str] = None):
        self.uid = uid
        self.email = email

    @classmethod
    def from_record(cls, record: Any) -> 'AuthUser':
        """Create AuthUser from a firebase_admin UserRecord"""
        return cls(uid=record.uid, email=getattr(record, 'email', None))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'uid': self.uid,
            'email': self.email
        }

class ConnectionReport:
    def __init__(
        self,
        firestore_ok: bool = False,
        documents_found: int = 0,
        auth_ok: bool = False,
        users: Optional[List[AuthUser]] = None,
        error: Optional[str] = None
    ):
        self.firestore_ok = firestore_ok
        self.documents_found = documents_found
        self.auth_ok = auth_ok
        self.users = users or []
        self.error = error

    @property
    def success(self) -> bool:
        """Both services answered and nothing failed"""
        return self.firestore_ok and self.auth_ok and self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'firestore_ok': self.firestore_ok,
            'documents_found': self.documents_found,
            'auth_ok': self.auth_ok,
            'users': [user.to_dict() for user in self.users],
            'error': self.error
        }
