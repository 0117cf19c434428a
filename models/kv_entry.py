from sqlalchemy import Column, String, Text
from core.db import Base

class KeyValueEntry(Base):
    __tablename__ = "kv_store"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)

    def __repr__(self):
        return f"<KeyValueEntry {self.key}={self.value!r}>"
