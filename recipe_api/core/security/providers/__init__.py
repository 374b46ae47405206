from .auth_provider import AuthProvider
from .credentials_provider import CredentialsProvider

__all__ = ["AuthProvider", "CredentialsProvider"]
