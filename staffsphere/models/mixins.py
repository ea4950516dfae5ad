from sqlalchemy.orm import declared_attr

from ..extensions import db


class TimestampMixin:
    """A mixin for created_at and updated_at timestamps."""

    __abstract__ = True  # This is an abstract mixin, not a standalone model

    created_at = db.Column(db.DateTime(timezone=True), default=db.func.current_timestamp(), nullable=False)
    updated_at = db.Column(
        db.DateTime(timezone=True), default=db.func.current_timestamp(), onupdate=db.func.current_timestamp(), nullable=False
    )


class AuditMixin:
    """Tracks which user created and last updated a record."""

    __abstract__ = True

    # Foreign keys on mixins have to be declared per mapped class
    @declared_attr
    def created_by(cls):
        return db.Column(db.Integer, db.ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    @declared_attr
    def updated_by(cls):
        return db.Column(db.Integer, db.ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    def touch(self, user_id):
        """Record the acting user. New records also get created_by."""
        if self.id is None and self.created_by is None:
            self.created_by = user_id
        self.updated_by = user_id
        return self
