import logging

from flask import jsonify, request
from google.api_core import exceptions as google_exceptions

from . import json_object, tasks_bp
from taskflow.config.firebase_config import get_context
from taskflow.services.validation_service import ValidationService
from taskflow.utils.errors import NotFoundError, ProviderError, ValidationError
from taskflow.utils.validators import Helpers

logger = logging.getLogger(__name__)

# Firestore raises ValueError for malformed paths or update payloads
STORE_ERRORS = (google_exceptions.GoogleAPIError, ValueError, TypeError)


def _require_user_id(user_id):
    result = ValidationService.validate_user_id(user_id)
    if not result['valid']:
        raise ValidationError(result['error'])
    return result['value']


@tasks_bp.get("")
def get_tasks():
    """All tasks of the user given by the `userId` query parameter"""
    user_id = request.args.get("userId")
    logger.info(f"Listing tasks for user {user_id}")
    if not ValidationService.validate_user_id(user_id)['valid']:
        raise ValidationError('Invalid userId.', title='Error retrieving tasks')

    task_model = get_context().tasks
    try:
        tasks = task_model.list_tasks(user_id)
    except STORE_ERRORS as e:
        logger.error(f"Failed to list tasks for {user_id}: {e}")
        raise ProviderError.from_exception(e, title='Error retrieving tasks', status=400)

    return jsonify(Helpers.build_response(
        'Tasks retrieved successfully',
        "The user's tasks were retrieved.",
        tasks=tasks
    )), 200


@tasks_bp.post("")
def add_task():
    """
    Create a task.
    Expected payload: {userId, name, description?, date?, startTime?, endTime?,
                       completed, favorite, tags?}
    Returns: {title, message, taskId}
    """
    payload = json_object()
    logger.info(f"Task data received: {payload}")

    result = ValidationService.validate_new_task(payload)
    if not result['valid']:
        raise ValidationError(result['error'])

    task_doc = result['value']
    task_model = get_context().tasks
    try:
        task_id = task_model.create_task(task_doc['userId'], task_doc)
    except STORE_ERRORS as e:
        logger.error(f"Failed to add task: {e}")
        raise ProviderError.from_exception(e, title='Error adding task', status=500)

    logger.info(f"Task {task_id} created for user {task_doc['userId']}")
    return jsonify(Helpers.build_response(
        'Task created successfully',
        'The task was created successfully.',
        taskId=task_id
    )), 201


@tasks_bp.put("/<task_id>")
def update_task(task_id):
    """Partial update with the exact body supplied, `userId` included"""
    payload = json_object()
    user_id = _require_user_id(payload.get("userId"))
    task_model = get_context().tasks

    try:
        existing = task_model.get_task(user_id, task_id)
    except STORE_ERRORS as e:
        raise ProviderError.from_exception(e, title='Error updating task', status=500)
    if existing is None:
        raise NotFoundError('Task not found.', title='Error updating task')

    try:
        task_model.update_task(user_id, task_id, payload)
    except STORE_ERRORS as e:
        logger.error(f"Failed to update task {task_id}: {e}")
        raise ProviderError.from_exception(e, title='Error updating task', status=500)

    logger.info(f"Task {task_id} updated")
    return jsonify(Helpers.build_response(
        'Task updated successfully',
        'The task was updated successfully.'
    )), 200


@tasks_bp.delete("/<task_id>")
def delete_task(task_id):
    user_id = _require_user_id(request.args.get("userId"))
    task_model = get_context().tasks

    try:
        existing = task_model.get_task(user_id, task_id)
    except STORE_ERRORS as e:
        raise ProviderError.from_exception(e, title='Error deleting task', status=500)
    if existing is None:
        raise NotFoundError('Task not found.', title='Error deleting task')

    try:
        task_model.delete_task(user_id, task_id)
    except STORE_ERRORS as e:
        logger.error(f"Failed to delete task {task_id}: {e}")
        raise ProviderError.from_exception(e, title='Error deleting task', status=500)

    logger.info(f"Task {task_id} deleted")
    return jsonify(Helpers.build_response(
        'Task deleted successfully',
        'The task was deleted successfully.'
    )), 200
