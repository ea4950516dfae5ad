from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..enums.role import Role
from ..extensions import db
from .mixins import TimestampMixin


class User(db.Model, TimestampMixin):
    """Login account. The role is what ends up inside issued tokens."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), nullable=False, unique=True, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.Enum(Role), nullable=False, default=Role.EMPLOYEE)

    department = db.Column(db.String(120), nullable=True)
    phone = db.Column(db.String(40), nullable=True)
    address = db.Column(db.String(255), nullable=True)
    profile_image = db.Column(db.String(512), nullable=True)
    language = db.Column(db.String(32), nullable=True)
    theme = db.Column(db.String(32), nullable=False, default="light")
    dob = db.Column(db.Date, nullable=True)
    gender = db.Column(db.String(16), nullable=True)

    def __repr__(self):
        return f"<User {self.id} - {self.email} ({self.role})>"

    @staticmethod
    def normalize_email(email: str) -> str:
        return email.strip().lower()

    @staticmethod
    def get_by_email(email: str) -> Optional["User"]:
        return User.query.filter_by(email=User.normalize_email(email)).first()

    @staticmethod
    def create(name: str, email: str, password: str, role: Optional[str] = None) -> "User":
        """Build a new user. Unknown roles become EMPLOYEE."""
        user = User(
            name=name.strip(),
            email=User.normalize_email(email),
            role=Role.coerce(role),
        )
        user.set_password(password)
        return user

    def set_password(self, password: str):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)
