import logging
from functools import wraps

from flask import request
from google.api_core import exceptions as google_exceptions

from taskflow.config.firebase_config import get_context
from taskflow.utils.errors import ApiError, AuthenticationError

logger = logging.getLogger(__name__)


class AuthMiddleware:
    """Authentication middleware for Firebase ID tokens"""

    @staticmethod
    def extract_bearer_token():
        """Token from an `Authorization: Bearer <token>` header, or None"""
        auth_header = request.headers.get('Authorization', '')
        parts = auth_header.split(" ")
        if len(parts) != 2 or parts[0].lower() != 'bearer' or not parts[1]:
            return None
        return parts[1]

    @staticmethod
    def verify_token(f):
        """Decorator to verify the Firebase ID token and load the caller's profile"""
        @wraps(f)
        def decorated_function(*args, **kwargs):
            token = AuthMiddleware.extract_bearer_token()
            if not token:
                raise AuthenticationError('Token not provided')

            context = get_context()
            try:
                decoded_token = context.identity.verify_token(token)
                uid = decoded_token['uid']
                user_data = context.users.get_user(uid)
                if user_data is None:
                    raise LookupError(f"No profile for {uid}")
            except (ApiError, google_exceptions.GoogleAPIError, KeyError, LookupError) as e:
                # Same message whichever step failed
                logger.warning(f"Authentication failed: {e}")
                raise AuthenticationError('Invalid token or failed to authenticate')

            request.current_user = decoded_token
            request.current_user_data = {'uid': uid, **user_data}
            return f(*args, **kwargs)

        return decorated_function

    @staticmethod
    def get_current_user():
        """Get current user profile from request"""
        return getattr(request, 'current_user_data', None)
