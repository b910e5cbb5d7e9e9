"""
Authentication and profile endpoints backed by Firebase Auth, Firestore and Cloud Storage.
"""
from flask import jsonify, request

from . import auth_bp, json_object
from taskflow.config.firebase_config import get_context
from taskflow.middleware.auth_middleware import AuthMiddleware
from taskflow.services.auth_service import AuthService
from taskflow.utils.validators import Helpers


def _auth_service() -> AuthService:
    return AuthService(get_context())


def _profile_updates() -> dict:
    """Profile fields from the multipart form and/or a JSON body"""
    updates = request.form.to_dict()
    if request.is_json:
        updates.update(json_object())
    return updates


@auth_bp.get("/")
def auth_status():
    return "Auth API is running!", 200


@auth_bp.post("/register")
def register_user():
    """
    Register a new user with Firebase Authentication and create the profile document.
    Expected payload: {email, password, name}
    Returns: {title, message, uid, name, email}
    """
    payload = json_object()
    result = _auth_service().register_user(
        payload.get("email"), payload.get("password"), payload.get("name"))
    return jsonify(result), 201


@auth_bp.post("/login")
def login_user():
    """
    Resolve the account by email and return its profile.
    Expected payload: {email, password}
    """
    payload = json_object()
    result = _auth_service().login_user(payload.get("email"), payload.get("password"))
    return jsonify(result), 200


@auth_bp.post("/logout")
def logout_user():
    return jsonify(AuthService.logout()), 200


@auth_bp.put("/update/<uid>")
def update_user_profile(uid):
    """
    Partial profile update. Accepts multipart form data with an optional
    `image` file, or a JSON body.
    """
    image = request.files.get("image")
    image_data = image.read() if image else None
    result = _auth_service().update_user_profile(
        uid.strip(),
        _profile_updates(),
        image=image_data,
        image_content_type=image.mimetype if image else None,
    )
    return jsonify(result), 200


@auth_bp.get("/user/<uid>")
def get_user_profile(uid):
    return jsonify(_auth_service().get_user_profile(uid.strip())), 200


@auth_bp.get("/me")
@AuthMiddleware.verify_token
def current_user_profile():
    """Profile of the caller identified by the bearer token"""
    return jsonify(Helpers.build_response(
        'User profile retrieved',
        'The authenticated user profile was retrieved successfully.',
        AuthMiddleware.get_current_user()
    )), 200
