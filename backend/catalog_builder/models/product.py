from catalog_builder.extensions import db
from .base import BaseModel


product_variant_options = db.Table(
    "product_variant_options",
    db.Column(
        "variant_id",
        db.String(36),
        db.ForeignKey("product_variants.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    db.Column(
        "value_id",
        db.String(36),
        db.ForeignKey("product_option_values.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Product(BaseModel):
    __tablename__ = "products"

    user_id = db.Column(db.String(36), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    price = db.Column(db.Numeric(10, 2), nullable=True)

    options = db.relationship(
        "ProductOption",
        back_populates="product",
        order_by="ProductOption.sort",
        cascade="all, delete-orphan",
    )
    variants = db.relationship(
        "ProductVariant",
        back_populates="product",
        order_by="ProductVariant.sort",
        cascade="all, delete-orphan",
    )


class ProductOption(BaseModel):
    __tablename__ = "product_options"

    product_id = db.Column(
        db.String(36),
        db.ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = db.Column(db.String(100), nullable=False)
    sort = db.Column(db.Integer, nullable=False, default=0)

    product = db.relationship("Product", back_populates="options")
    values = db.relationship(
        "ProductOptionValue",
        back_populates="option",
        order_by="ProductOptionValue.sort",
        cascade="all, delete-orphan",
    )


class ProductOptionValue(BaseModel):
    __tablename__ = "product_option_values"

    option_id = db.Column(
        db.String(36),
        db.ForeignKey("product_options.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    value = db.Column(db.String(100), nullable=False)
    sort = db.Column(db.Integer, nullable=False, default=0)

    option = db.relationship("ProductOption", back_populates="values")


class ProductVariant(BaseModel):
    __tablename__ = "product_variants"

    product_id = db.Column(
        db.String(36),
        db.ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    sku = db.Column(db.String(100), nullable=True)
    price = db.Column(db.Numeric(10, 2), nullable=True)
    is_available = db.Column(db.Boolean, nullable=False, default=True)
    image_url = db.Column(db.String(512), nullable=True)
    sort = db.Column(db.Integer, nullable=False, default=0)

    product = db.relationship("Product", back_populates="variants")
    option_values = db.relationship(
        "ProductOptionValue",
        secondary=product_variant_options,
    )
