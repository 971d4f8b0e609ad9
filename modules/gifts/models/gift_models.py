from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String, Text, func
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Gift(Base):
    __tablename__ = "gifts"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    price = Column(Float, nullable=False, default=0, index=True)
    link = Column(Text)
    available = Column(Boolean, nullable=False, default=True)
    is_custom = Column(Boolean, nullable=False, default=False)
    buyer_name = Column(String)
    buyer_phone = Column(String)
    buyer_message = Column(Text)
    created_at = Column(DateTime, server_default=func.now())
    purchased_at = Column(DateTime)

    def as_dict(self) -> dict:
        return {c.name: getattr(self, c.name) for c in self.__table__.columns}
