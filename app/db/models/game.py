from sqlalchemy import JSON, Column, Date, String, Text

from app.db.base import Base, generate_id


class Game(Base):
    __tablename__ = "games"

    id = Column(String(32), primary_key=True, default=generate_id)
    title = Column(String(255), nullable=False, index=True)
    genre = Column(JSON, nullable=False, default=list)
    platform = Column(String(100), nullable=False)
    explore = Column(JSON, nullable=False, default=list)
    release_date = Column(Date, nullable=True)
    developer = Column(JSON, nullable=False, default=list)
    publisher = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    esrb_rating = Column(String(20), nullable=False)
