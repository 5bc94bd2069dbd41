from sqlalchemy import BigInteger, Column, DateTime, String, Text, func

from database import Base, utcnow
from utils.ids import new_id


class Media(Base):
    __tablename__ = "medias"

    id = Column(String(26), primary_key=True, default=new_id)
    # Identifier of the file at the storage provider
    file_id = Column(String(255), nullable=False, index=True)
    file_name = Column(String(255), nullable=False)
    url = Column(String(1024), nullable=False)
    thumb_url = Column(String(1024), nullable=True)
    file_type = Column(String(64), nullable=True)
    size = Column(BigInteger, nullable=False, default=0)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, server_default=func.now(), nullable=False
    )
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)
