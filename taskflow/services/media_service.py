import logging

from google.api_core import exceptions as google_exceptions

from taskflow.utils.errors import ProviderError
from taskflow.utils.validators import Helpers

logger = logging.getLogger(__name__)

PUBLIC_URL_BASE = "https://storage.googleapis.com"
PROFILE_IMAGE_PREFIX = "profileImages"


class MediaService:
    """Profile image uploads to the Cloud Storage bucket"""

    def __init__(self, bucket=None):
        self.bucket = bucket

    @staticmethod
    def profile_image_path(uid: str, millis: int) -> str:
        return f"{PROFILE_IMAGE_PREFIX}/{uid}_{millis}.jpg"

    def public_url(self, path: str) -> str:
        return f"{PUBLIC_URL_BASE}/{self.bucket.name}/{path}"

    def upload_profile_image(self, uid: str, data: bytes, content_type: str = "image/jpeg") -> str:
        """Store an image for `uid`, make it publicly readable and return its URL"""
        if self.bucket is None:
            raise ProviderError("Storage bucket is not configured", status=503, title="Upload failed")

        path = self.profile_image_path(uid, Helpers.current_millis())
        logger.info(f"Uploading profile image {path} ({len(data)} bytes)")
        try:
            blob = self.bucket.blob(path)
            blob.upload_from_string(data, content_type=content_type)
            blob.make_public()
        except google_exceptions.GoogleAPIError as e:
            logger.error(f"Profile image upload failed for {uid}: {e}")
            raise ProviderError.from_exception(e, title="Upload failed")

        url = self.public_url(path)
        logger.info(f"Profile image available at {url}")
        return url
