from sqlalchemy import Column, Index, Integer, Text
from ..database import Base

class Target(Base):
    __tablename__ = "targets"
    __table_args__ = (
        Index("target_key_idx", "key", unique=True),
        Index("target_name_idx", "name", unique=True),
    )

    id = Column(Integer, primary_key=True)
    key = Column(Text, nullable=False)
    name = Column(Text, nullable=False)
    kind = Column(Text, nullable=False)
    enabled = Column(Integer, nullable=False)  # 0 / 1
