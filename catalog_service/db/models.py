# catalog_service/db/models.py
import secrets

from sqlalchemy import Column, ForeignKey, Numeric, String
from sqlalchemy.orm import relationship

from catalog_service.db.database import Base


def new_object_id() -> str:
    # 24 hex-символа, как у идентификаторов в исходных JSON-фикстурах
    return secrets.token_hex(12)


class ProductBrand(Base):
    __tablename__ = "brands"

    id = Column(String(24), primary_key=True, default=new_object_id)
    name = Column(String, index=True, nullable=False)

    products = relationship("Product", back_populates="brand")


class ProductType(Base):
    __tablename__ = "types"

    id = Column(String(24), primary_key=True, default=new_object_id)
    name = Column(String, index=True, nullable=False)

    products = relationship("Product", back_populates="type")


class Product(Base):
    __tablename__ = "products"

    id = Column(String(24), primary_key=True, default=new_object_id)
    name = Column(String, index=True, nullable=False)
    summary = Column(String, nullable=True)
    description = Column(String, nullable=True)
    image_file = Column(String, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    brand_id = Column(String(24), ForeignKey("brands.id"))
    type_id = Column(String(24), ForeignKey("types.id"))

    brand = relationship("ProductBrand", back_populates="products")
    type = relationship("ProductType", back_populates="products")
