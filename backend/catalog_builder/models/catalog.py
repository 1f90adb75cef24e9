from catalog_builder.extensions import db
from .base import BaseModel


class Catalog(BaseModel):
    __tablename__ = "catalogs"

    user_id = db.Column(db.String(36), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    slug = db.Column(db.String(200), nullable=False, index=True)
    status = db.Column(db.String(20), nullable=False, default="rascunho", index=True)  # rascunho | publicado
    link_active = db.Column("link_ativo", db.Boolean, nullable=False, default=False)
    on_profile = db.Column("no_perfil", db.Boolean, nullable=False, default=False)
    cover = db.Column(db.JSON, nullable=True)
    theme_overrides = db.Column(db.JSON, nullable=False, default=dict)

    __table_args__ = (
        db.UniqueConstraint("user_id", "slug", name="uq_catalog_slug_per_user"),
    )

    # Relationship to Blocks (ordered, cascade deletes)
    blocks = db.relationship(
        "CatalogBlock",
        back_populates="catalog",
        order_by="CatalogBlock.sort",
        cascade="all, delete-orphan",
    )

    @property
    def is_public(self):
        return self.status == "publicado" and bool(self.link_active)
