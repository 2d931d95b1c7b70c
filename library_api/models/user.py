from datetime import datetime
from library_api.extensions import db


class User(db.Model):
    __tablename__ = "users"

    user_id = db.Column(db.String(32), primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        # hash never leaves the store
        return {"user_id": self.user_id, "username": self.username}
