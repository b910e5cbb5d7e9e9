import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings:
    # Flask settings
    SECRET_KEY = os.getenv('SECRET_KEY')
    FLASK_ENV = os.getenv('FLASK_ENV', 'development')
    DEBUG = FLASK_ENV == 'development'
    TESTING = False
    PORT = int(os.getenv('PORT', 5000))

    # Start without Firebase (requests that need it answer 503)
    DEV_MODE = os.getenv('DEV_MODE', 'false').lower() == 'true'

    # CORS settings
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*').split(',')

    # Firebase settings
    FIREBASE_PROJECT_ID = os.getenv('FIREBASE_PROJECT_ID')
    STORAGE_BUCKET = os.getenv('STORAGE_BUCKET')

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Application settings
    MAX_CONTENT_LENGTH = 5 * 1024 * 1024  # 5MB max profile image

    @classmethod
    def validate(cls):
        """Validate required settings"""
        required_vars = [
            'FIREBASE_PROJECT_ID',
            'STORAGE_BUCKET',
        ]

        missing_vars = [var for var in required_vars if not getattr(cls, var)]

        if missing_vars:
            raise ValueError(f"Missing required environment variables: {', '.join(missing_vars)}")

        return True
