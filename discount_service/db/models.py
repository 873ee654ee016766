# discount_service/db/models.py
from sqlalchemy import Column, Integer, String

from discount_service.db.database import Base


class Coupon(Base):
    __tablename__ = "coupons"

    id = Column(Integer, primary_key=True, index=True)
    product_name = Column(String(500), index=True, nullable=False)
    description = Column(String, nullable=True)
    amount = Column(Integer, nullable=False, default=0)
