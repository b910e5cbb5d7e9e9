from flask import Blueprint, request

from taskflow.utils.errors import ValidationError

auth_bp = Blueprint("auth", __name__, url_prefix="/auth")
tasks_bp = Blueprint("tasks", __name__, url_prefix="/tasks")


def json_object():
    """Request body as a dict; a missing or unparsable body counts as empty"""
    payload = request.get_json(force=True, silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError('Request body must be a JSON object.')
    return payload


# Import modules so routes attach
from . import auth  # noqa
from . import tasks  # noqa

__all__ = [
    "auth_bp",
    "tasks_bp",
    "json_object",
]
