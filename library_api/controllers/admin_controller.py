from flask import Blueprint, jsonify

from library_api.errors import ApiError
from library_api.services.auth_service import AuthService
from library_api.utils.auth import token_required, current_identity
from library_api.utils.payload import json_object, text_field

admin_bp = Blueprint("admin", __name__)


@admin_bp.post("/adminlogin")
def admin_login():
    # login answers with loginStatus instead of Status
    try:
        data = json_object()
        username = text_field(data, "username").strip()
        password = text_field(data, "password")
        if not username or not password:
            return jsonify({"loginStatus": False, "Error": "Username and password required"}), 400

        token, _user = AuthService.login(username, password)
        return jsonify({"loginStatus": True, "token": token})
    except ApiError as e:
        return jsonify({"loginStatus": False, "Error": e.message}), e.status_code


@admin_bp.post("/add_user")
@token_required
def add_user():
    data = json_object()
    user = AuthService.create_user(
        text_field(data, "username").strip(),
        text_field(data, "password"),
    )
    return jsonify({"Status": True, "UserId": user.user_id}), 201


@admin_bp.put("/edit_user/<user_id>")
@token_required
def edit_user(user_id):
    data = json_object()
    AuthService.update_user(
        user_id,
        username=text_field(data, "username").strip() or None,
        password=text_field(data, "password") or None,
    )
    return jsonify({"Status": True, "Result": "Update successful"})


@admin_bp.delete("/delete_user/<user_id>")
@token_required
def delete_user(user_id):
    AuthService.delete_user(user_id)
    return jsonify({"Status": True, "Result": "User deleted successfully"})


@admin_bp.get("/users")
@token_required
def list_users():
    users = AuthService.list_users()
    return jsonify({"Status": True, "Users": [u.to_dict() for u in users]})


@admin_bp.get("/profile")
@token_required
def profile():
    user = AuthService.get_profile(current_identity().user_id)
    return jsonify({"Status": True, "User": user.to_dict()})


@admin_bp.post("/change-password")
@token_required
def change_password():
    data = json_object()
    AuthService.change_password(
        current_identity().user_id,
        text_field(data, "currentPassword"),
        text_field(data, "newPassword"),
    )
    return jsonify({"Status": True, "Message": "Password updated successfully"})
