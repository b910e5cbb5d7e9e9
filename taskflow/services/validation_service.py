"""
Task input validation
Each validator returns {'valid': True, 'value': ...} or {'valid': False, 'error': ...}
"""
from typing import Any, Dict

from taskflow.utils.validators import Validators


class ValidationService:
    """Validation of task request bodies"""

    OPTIONAL_STRING_FIELDS = [
        ('description', 'Description must be a string.'),
        ('date', 'Date must be a string.'),
        ('startTime', 'Start time must be a string.'),
        ('endTime', 'End time must be a string.'),
    ]

    @staticmethod
    def validate_user_id(user_id: Any) -> Dict[str, Any]:
        if not Validators.is_non_empty_string(user_id):
            return {'valid': False, 'error': 'Invalid userId.'}
        return {'valid': True, 'value': user_id}

    @staticmethod
    def validate_new_task(payload: Dict[str, Any]) -> Dict[str, Any]:
        """Validate a task creation body.

        Rules run in a fixed order and the first failure is returned. On
        success `value` is the document to store: supplied fields, `userId`
        and `tags` defaulting to an empty list. Optional strings that are
        absent or null are left out.
        """
        user_id_result = ValidationService.validate_user_id(payload.get('userId'))
        if not user_id_result['valid']:
            return user_id_result

        name = payload.get('name')
        if not isinstance(name, str) or name == '':
            return {'valid': False, 'error': 'Task name is required and must be a string.'}

        for field, error in ValidationService.OPTIONAL_STRING_FIELDS:
            if not Validators.is_optional_string(payload.get(field)):
                return {'valid': False, 'error': error}

        if not Validators.is_boolean(payload.get('completed')):
            return {'valid': False, 'error': 'Completed status must be a boolean.'}

        if not Validators.is_boolean(payload.get('favorite')):
            return {'valid': False, 'error': 'Favorite status must be a boolean.'}

        tags = payload.get('tags')
        if not Validators.is_optional_list(tags):
            return {'valid': False, 'error': 'Tags must be an array.'}

        task_doc = {'name': name}
        for field, _ in ValidationService.OPTIONAL_STRING_FIELDS:
            if payload.get(field) is not None:
                task_doc[field] = payload[field]
        task_doc['completed'] = payload['completed']
        task_doc['favorite'] = payload['favorite']
        task_doc['tags'] = tags if tags is not None else []
        task_doc['userId'] = user_id_result['value']

        return {'valid': True, 'value': task_doc}
