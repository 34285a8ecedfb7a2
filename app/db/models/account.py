from sqlalchemy import JSON, Column, String

from app.db.base import Base, generate_id


class Account(Base):
    __tablename__ = "accounts"

    id = Column(String(32), primary_key=True, default=generate_id)
    username = Column(String(150), nullable=False, unique=True, index=True)
    # Identifiers of contracts rented through this account
    contract_ids = Column(JSON, nullable=False, default=list)
