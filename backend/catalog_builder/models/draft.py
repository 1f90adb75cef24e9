from catalog_builder.extensions import db
from .base import BaseModel


class Draft(BaseModel):
    __tablename__ = "drafts"

    user_id = db.Column(db.String(36), nullable=False, index=True)
    key = db.Column(db.String(200), nullable=False)
    snapshot = db.Column(db.JSON, nullable=False)

    __table_args__ = (
        db.UniqueConstraint("user_id", "key", name="uq_draft_key_per_user"),
    )
