from ..enums.notification_level import NotificationLevel
from ..extensions import db
from .mixins import TimestampMixin


class Notification(db.Model, TimestampMixin):
    id = db.Column(db.Integer, primary_key=True)
    message = db.Column(db.String(500), nullable=False)
    level = db.Column(db.Enum(NotificationLevel), nullable=False, default=NotificationLevel.INFO)
    read = db.Column(db.Boolean, nullable=False, default=False)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True)

    def __repr__(self):
        return f"<Notification {self.id} - {self.level}>"
