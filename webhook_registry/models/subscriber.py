from sqlalchemy import Column, Index, Integer, Text
from ..database import Base

class Subscriber(Base):
    __tablename__ = "subscribers"
    __table_args__ = (
        Index("subscriber_name_idx", "name", unique=True),
    )

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    event = Column(Text, nullable=False)
    method = Column(Text, nullable=False)
    url = Column(Text, nullable=False)
    headers = Column(Text, nullable=True)
    data = Column(Text, nullable=True)
