from sqlalchemy import JSON, Column, Date, Numeric, String

from app.db.base import Base, generate_id


class Contract(Base):
    __tablename__ = "contracts"

    id = Column(String(32), primary_key=True, default=generate_id)
    # Not a foreign key: the game reference is not enforced by the store
    game_id = Column(String(32), nullable=True, index=True)
    status = Column(String(20), nullable=False, default="Pending", index=True)
    # Embedded customer snapshot: {"name", "phone_number", "email", "address"}
    customer_info = Column(JSON, nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    payment_method = Column(String(50), nullable=True)
    shipment_method = Column(String(50), nullable=True)
    shipping_fee = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    late_fee = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    total_cost = Column(Numeric(10, 2, asdecimal=False), nullable=True)
