from sqlalchemy import Column, DateTime, String, func

from database import Base, utcnow
from utils.ids import new_id


class Brand(Base):
    __tablename__ = "brands"

    id = Column(String(26), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), unique=True, nullable=False, index=True)
    status = Column(String(16), nullable=False, default="active", server_default="active", index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, server_default=func.now(), nullable=False
    )
    # NULL while active; set by soft delete
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)
