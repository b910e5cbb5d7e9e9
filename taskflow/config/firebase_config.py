import logging
import os
from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore, storage
from flask import current_app

from taskflow.firebase_utils import get_firebase_credentials
from taskflow.models.task_model import TaskModel
from taskflow.models.user_model import UserModel
from taskflow.services.identity_service import IdentityService
from taskflow.services.media_service import MediaService
from taskflow.utils.errors import ProviderError

logger = logging.getLogger(__name__)

EXTENSION_KEY = 'firebase'


class FirebaseContext:
    """Process-wide Firebase clients, built once at startup and read-only afterwards"""

    def __init__(self, db, identity: IdentityService, media: MediaService, app=None):
        self.app = app
        self.db = db
        self.identity = identity
        self.media = media
        self.users = UserModel(db)
        self.tasks = TaskModel(db)

    @classmethod
    def from_app(cls, app, bucket_name: Optional[str] = None) -> "FirebaseContext":
        """Build the context from an initialized firebase_admin App"""
        db = firestore.client(app=app)
        bucket = storage.bucket(bucket_name, app=app) if bucket_name else None
        return cls(db=db, identity=IdentityService(app), media=MediaService(bucket), app=app)


def _emulator_hosts():
    return {
        'Firestore': os.getenv('FIRESTORE_EMULATOR_HOST'),
        'Auth': os.getenv('FIREBASE_AUTH_EMULATOR_HOST'),
        'Storage': os.getenv('FIREBASE_STORAGE_EMULATOR_HOST'),
    }


def _get_or_initialize_app(settings):
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    options = {}
    if settings.STORAGE_BUCKET:
        options['storageBucket'] = settings.STORAGE_BUCKET

    emulators = {name: host for name, host in _emulator_hosts().items() if host}
    if emulators:
        for name, host in emulators.items():
            logger.info(f"Using {name} emulator at {host}")
        # Emulators ignore credentials, only the project id is needed
        options['projectId'] = settings.FIREBASE_PROJECT_ID or os.getenv('GCLOUD_PROJECT', 'demo-taskflow')
        return firebase_admin.initialize_app(options=options)

    cred = credentials.Certificate(get_firebase_credentials())
    if settings.FIREBASE_PROJECT_ID:
        options['projectId'] = settings.FIREBASE_PROJECT_ID
    return firebase_admin.initialize_app(cred, options)


def init_firebase(settings) -> Optional[FirebaseContext]:
    """Initialize Firebase, returning None when it is disabled or unavailable."""
    if settings.DEV_MODE:
        logger.warning("Running in DEV_MODE - Firebase disabled")
        return None

    try:
        app = _get_or_initialize_app(settings)
        context = FirebaseContext.from_app(app, settings.STORAGE_BUCKET)
    except ValueError as e:
        logger.warning(f"Firebase not configured: {e}")
        return None
    except Exception as e:
        logger.error(f"Firebase initialization failed: {e}")
        return None

    if not settings.STORAGE_BUCKET:
        logger.warning("STORAGE_BUCKET is not set, profile image uploads are disabled")
    logger.info(f"Firebase initialized for project: {app.project_id}")
    return context


def get_context() -> FirebaseContext:
    """Firebase context of the current Flask app"""
    context = current_app.extensions.get(EXTENSION_KEY)
    if context is None:
        raise ProviderError("Firebase is not configured", status=503, title="Service unavailable")
    return context
