from flask import current_app
from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash, check_password_hash

from library_api.errors import Conflict, NotFound, Unauthorized, ValidationError
from library_api.extensions import db
from library_api.models.user import User
from library_api.repositories.user_repo import UserRepo
from library_api.utils.ids import new_record_id
from library_api.utils.tokens import issue_token


def _hash(password: str) -> str:
    return generate_password_hash(password, method=current_app.config["PASSWORD_HASH_METHOD"])


class AuthService:
    @staticmethod
    def login(username: str, password: str):
        user = UserRepo.get_by_username(username)
        if not user:
            raise NotFound("User not found!")
        if not check_password_hash(user.password_hash, password):
            current_app.logger.info(f"[auth] Wrong password for '{username}'")
            raise Unauthorized("Incorrect password!")

        current_app.logger.info(f"[auth] '{username}' logged in")
        return issue_token(user), user

    @staticmethod
    def create_user(username: str, password: str):
        if not username or not password:
            raise ValidationError("Username and password required")
        if UserRepo.get_by_username(username):
            raise Conflict("Username already exists")

        user = User(
            user_id=new_record_id(),
            username=username,
            password_hash=_hash(password),
        )
        try:
            return UserRepo.create(user)
        except IntegrityError:
            # lost a race on the unique username index
            db.session.rollback()
            raise Conflict("Username already exists")

    @staticmethod
    def update_user(user_id: str, username: str | None = None, password: str | None = None):
        if not username and not password:
            raise ValidationError("No updates provided")

        user = UserRepo.get_by_id(user_id)
        if not user:
            raise NotFound("User not found")

        if username and username != user.username:
            if UserRepo.get_by_username(username):
                raise Conflict("Username already exists")
            user.username = username
        if password:
            user.password_hash = _hash(password)

        try:
            UserRepo.update()
        except IntegrityError:
            db.session.rollback()
            raise Conflict("Username already exists")
        return user

    @staticmethod
    def delete_user(user_id: str):
        if UserRepo.delete(user_id) == 0:
            raise NotFound("User not found or already deleted")

    @staticmethod
    def list_users():
        return UserRepo.list_all()

    @staticmethod
    def get_profile(user_id: str):
        user = UserRepo.get_by_id(user_id)
        if not user:
            raise NotFound("User not found")
        return user

    @staticmethod
    def change_password(user_id: str, current_password: str, new_password: str):
        if not current_password or not new_password:
            raise ValidationError("Missing fields")

        user = UserRepo.get_by_id(user_id)
        if not user:
            raise NotFound("User not found")

        if not check_password_hash(user.password_hash, current_password):
            current_app.logger.info(f"[auth] Password change refused for '{user.username}'")
            raise Unauthorized("Incorrect password")

        user.password_hash = _hash(new_password)
        UserRepo.update()
        current_app.logger.info(f"[auth] Password changed for '{user.username}'")
