from sqlalchemy import Column, DateTime, ForeignKey, String, Text, func

from database import Base, utcnow
from utils.ids import new_id


class Category(Base):
    __tablename__ = "categories"

    id = Column(String(26), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)
    status = Column(String(16), nullable=False, default="active", server_default="active", index=True)
    media_id = Column(String(26), ForeignKey("medias.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, server_default=func.now(), nullable=False
    )
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)
