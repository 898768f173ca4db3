from sqlalchemy import Column, ForeignKey, Index, Integer, Table, Text
from ..database import Base

# Association rows have no identity of their own, so this stays a plain
# Table rather than a mapped class.
target_subscriber = Table(
    "target_subscriber",
    Base.metadata,
    Column("event", Text, nullable=False),
    Column("enabled", Integer, nullable=False),
    Column("target_id", Integer, ForeignKey("targets.id", ondelete="CASCADE")),
    Column("subscriber_id", Integer, ForeignKey("subscribers.id", ondelete="CASCADE")),
    Index("target_subscriber_idx", "target_id", "subscriber_id"),
)
