from catalog_builder.extensions import db
from .base import BaseModel


class CatalogBlock(BaseModel):
    __tablename__ = "catalog_blocks"

    catalog_id = db.Column(
        db.String(36),
        db.ForeignKey("catalogs.id", ondelete="CASCADE"),
        nullable=False,
    )
    type = db.Column(db.String(50), nullable=False)  # cover, product_grid, faq, ...
    data = db.Column(db.JSON, nullable=False, default=dict)
    sort = db.Column(db.Integer, nullable=False, default=0)
    visible = db.Column(db.Boolean, nullable=False, default=True)
    navigation_label = db.Column(db.String(100), nullable=True)
    anchor_slug = db.Column(db.String(100), nullable=True)

    catalog = db.relationship("Catalog", back_populates="blocks")

    # No unique constraint on (catalog_id, sort): batch re-sequencing passes
    # through intermediate states with duplicate values.
    __table_args__ = (
        db.Index("idx_block_catalog_sort", "catalog_id", "sort"),
    )
