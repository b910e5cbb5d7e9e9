import logging
from typing import Any, Dict

from firebase_admin import auth as firebase_auth
from firebase_admin import exceptions as firebase_exceptions

from taskflow.utils.errors import ProviderError

logger = logging.getLogger(__name__)


class IdentityService:
    """Firebase Authentication calls bound to one Firebase app"""

    def __init__(self, app=None):
        self.app = app

    def create_account(self, email: str, password: str) -> str:
        """Create an email/password account and return its uid"""
        try:
            user_record = firebase_auth.create_user(email=email, password=password, app=self.app)
        except (firebase_exceptions.FirebaseError, ValueError) as e:
            logger.warning(f"Account creation failed for {email}: {e}")
            raise ProviderError.from_exception(e, title="Registration failed")
        return user_record.uid

    def get_account_by_email(self, email: str) -> str:
        """Resolve the uid registered for an email"""
        try:
            user_record = firebase_auth.get_user_by_email(email, app=self.app)
        except (firebase_exceptions.FirebaseError, ValueError) as e:
            logger.warning(f"Account lookup failed for {email}: {e}")
            raise ProviderError.from_exception(e, title="Login failed")
        return user_record.uid

    def verify_token(self, id_token: str) -> Dict[str, Any]:
        """Verify a Firebase ID token and return its decoded claims"""
        try:
            return firebase_auth.verify_id_token(id_token, app=self.app)
        except (firebase_exceptions.FirebaseError, ValueError) as e:
            raise ProviderError.from_exception(e, title="Token verification failed", status=401)
