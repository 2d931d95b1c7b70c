from library_api.models.user import User
from library_api.extensions import db

class UserRepo:
    @staticmethod
    def get_by_username(username: str):
        return User.query.filter_by(username=username).first()

    @staticmethod
    def get_by_id(user_id: str):
        return db.session.get(User, user_id)

    @staticmethod
    def list_all():
        return User.query.order_by(User.username).all()

    @staticmethod
    def create(user: User):
        db.session.add(user)
        db.session.commit()
        return user

    @staticmethod
    def update():
        db.session.commit()

    @staticmethod
    def delete(user_id: str) -> int:
        deleted = User.query.filter_by(user_id=user_id).delete(synchronize_session=False)
        db.session.commit()
        return deleted
