import logging
from typing import Any, Dict, Optional

from taskflow.utils.errors import ApiError, NotFoundError, ValidationError
from taskflow.utils.validators import Helpers, Validators

logger = logging.getLogger(__name__)


class ProfileNotFoundError(ApiError):
    """Missing profile on a direct profile fetch, reported as a server error"""

    status = 500
    title = "Error retrieving profile"


class AuthService:
    """Registration, login and profile management on top of Firebase"""

    def __init__(self, context):
        self.identity = context.identity
        self.users = context.users
        self.media = context.media

    def register_user(self, email: Any, password: Any, name: Any) -> Dict[str, Any]:
        """Create the Firebase account and its profile document.

        The account is not removed if writing the profile fails.
        """
        if not all(Validators.is_non_empty_string(v) for v in (email, password, name)):
            raise ValidationError('email, password and name are required.')

        logger.info(f"Registering user {email}")
        uid = self.identity.create_account(email, password)
        self.users.create_user(uid, {'name': name, 'email': email})

        profile = self.users.get_user(uid)
        if profile is None:
            raise NotFoundError('User profile was not found after registration.',
                                title='Registration failed')

        logger.info(f"User {uid} registered")
        return Helpers.build_response(
            'User registered successfully',
            'The user was registered successfully.',
            {'uid': uid, **profile}
        )

    def login_user(self, email: Any, password: Any) -> Dict[str, Any]:
        """Resolve the account by email and return its profile.

        The password is required but not checked here.
        """
        if not Validators.is_non_empty_string(email) or not Validators.is_non_empty_string(password):
            raise ValidationError('email and password are required.')

        logger.info(f"Login requested for {email}")
        uid = self.identity.get_account_by_email(email)
        profile = self.users.get_user(uid)
        if profile is None:
            raise NotFoundError('User not found.', title='Login failed')

        return Helpers.build_response(
            'Login successful',
            'You are logged in successfully.',
            {'uid': uid, **profile}
        )

    def update_user_profile(self, uid: Any, updates: Dict[str, Any],
                            image: Optional[bytes] = None,
                            image_content_type: Optional[str] = None) -> Dict[str, Any]:
        """Apply a partial profile update, uploading a new profile image first if given"""
        if not Validators.is_non_empty_string(uid):
            raise ValidationError('uid is required.')

        updates = dict(updates)
        if image:
            updates['profileImage'] = self.media.upload_profile_image(
                uid, image, image_content_type or 'image/jpeg')

        if updates:
            logger.info(f"Updating profile {uid}: {sorted(updates)}")
            self.users.update_user(uid, updates)

        profile = self.users.get_user(uid)
        if profile is None:
            raise NotFoundError('User not found.', title='Error updating profile')

        return Helpers.build_response(
            'Profile updated successfully',
            'The user profile was updated successfully.',
            {'uid': uid, **profile}
        )

    @staticmethod
    def logout() -> Dict[str, Any]:
        # Tokens are discarded by the client, nothing to revoke here
        return Helpers.build_response(
            'Logout successful',
            'You have been logged out successfully.'
        )

    def get_user_profile(self, uid: Any) -> Dict[str, Any]:
        if not Validators.is_non_empty_string(uid):
            raise ValidationError('uid is required.')

        profile = self.users.get_user(uid)
        if profile is None:
            raise ProfileNotFoundError('User not found.')

        return Helpers.build_response(
            'User profile retrieved',
            'The user profile was retrieved successfully.',
            {'uid': uid, **profile}
        )
