# ordering_service/db/models.py
from sqlalchemy import Column, DateTime, Integer, Numeric, String

from ordering_service.db.database import Base


# Поля аудита заполняются перед сохранением, см. db/audit.py
class EntityBase:
    id = Column(Integer, primary_key=True, index=True)
    created_by = Column(String, nullable=True)
    created_date = Column(DateTime, nullable=True)
    last_modified_by = Column(String, nullable=True)
    last_modified_date = Column(DateTime, nullable=True)


class Order(EntityBase, Base):
    __tablename__ = "orders"

    user_name = Column(String(70), index=True, nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    email_address = Column(String, nullable=True)
    address_line = Column(String, nullable=True)
    country = Column(String, nullable=True)
    state = Column(String, nullable=True)
    zip_code = Column(String, nullable=True)
    card_name = Column(String, nullable=True)
    card_number = Column(String, nullable=True)
    expiration = Column(String, nullable=True)
    cvv = Column(String, nullable=True)
    payment_method = Column(Integer, nullable=True)
