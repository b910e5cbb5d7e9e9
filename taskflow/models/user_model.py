from typing import Any, Dict, Optional


class UserModel:
    """User profile documents in the Firestore `users` collection"""

    COLLECTION = 'users'

    def __init__(self, db):
        self.db = db

    @property
    def collection(self):
        return self.db.collection(self.COLLECTION)

    def create_user(self, uid: str, user_data: Dict[str, Any]) -> None:
        """Write the profile document keyed by the identity provider uid"""
        self.collection.document(uid).set(user_data)

    def get_user(self, uid: str) -> Optional[Dict[str, Any]]:
        """Get profile by uid, None when the document does not exist"""
        doc = self.collection.document(uid).get()
        if not doc.exists:
            return None
        return doc.to_dict() or {}

    def update_user(self, uid: str, update_data: Dict[str, Any]) -> None:
        """Partial update, fields not named keep their stored values"""
        self.collection.document(uid).update(update_data)
