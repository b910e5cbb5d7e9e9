from datetime import datetime, timezone
from typing import Any, Dict, Optional


class Validators:
    """Input validation utilities"""

    @staticmethod
    def is_non_empty_string(value: Any) -> bool:
        """True for a string with at least one non-whitespace character"""
        return isinstance(value, str) and value.strip() != ""

    @staticmethod
    def is_optional_string(value: Any) -> bool:
        """Absent (None) or a string"""
        return value is None or isinstance(value, str)

    @staticmethod
    def is_boolean(value: Any) -> bool:
        # bool is checked exactly, 0 and 1 are not booleans here
        return isinstance(value, bool)

    @staticmethod
    def is_optional_list(value: Any) -> bool:
        return value is None or isinstance(value, list)


class Helpers:
    """Utility helper functions"""

    @staticmethod
    def get_current_timestamp() -> datetime:
        return datetime.now(timezone.utc)

    @staticmethod
    def current_millis() -> int:
        """Milliseconds since the epoch, used to name uploaded files"""
        return int(Helpers.get_current_timestamp().timestamp() * 1000)

    @staticmethod
    def build_response(title: str, message: str, data: Optional[Dict[str, Any]] = None,
                       **extra: Any) -> Dict[str, Any]:
        """Build the standard {title, message, ...} response envelope"""
        response = {'title': title, 'message': message}
        if data:
            response.update(data)
        response.update(extra)
        return response
