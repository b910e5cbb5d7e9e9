from typing import Any, Dict, List, Optional

from taskflow.models.user_model import UserModel


class TaskModel:
    """Task documents stored under users/{userId}/Tasks"""

    SUBCOLLECTION = 'Tasks'

    def __init__(self, db):
        self.db = db

    def tasks_collection(self, user_id: str):
        return self.db.collection(UserModel.COLLECTION).document(user_id).collection(self.SUBCOLLECTION)

    def list_tasks(self, user_id: str) -> List[Dict[str, Any]]:
        """All tasks of a user as {id, ...fields}, in store order"""
        return [{'id': doc.id, **(doc.to_dict() or {})}
                for doc in self.tasks_collection(user_id).stream()]

    def create_task(self, user_id: str, task_doc: Dict[str, Any]) -> str:
        """Create a task with a Firestore generated id and return the id"""
        doc_ref = self.tasks_collection(user_id).document()
        doc_ref.set(task_doc)
        return doc_ref.id

    def get_task(self, user_id: str, task_id: str) -> Optional[Dict[str, Any]]:
        doc = self.tasks_collection(user_id).document(task_id).get()
        if not doc.exists:
            return None
        return {'id': doc.id, **(doc.to_dict() or {})}

    def update_task(self, user_id: str, task_id: str, update_data: Dict[str, Any]) -> None:
        self.tasks_collection(user_id).document(task_id).update(update_data)

    def delete_task(self, user_id: str, task_id: str) -> None:
        self.tasks_collection(user_id).document(task_id).delete()
