# models/menu_item.py
from sqlalchemy import Column, Integer, String, Float
from core.db import Base

class MenuItem(Base):
    __tablename__ = "menu"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    name = Column(String)
    price = Column(Float)
    description = Column(String)
    image = Column(String)  # filename under MENU_IMAGE_BASE_URL
    category = Column(String)  # starters, mains, desserts, drinks, speciality

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "description": self.description,
            "image": self.image,
            "category": self.category,
        }

    def __repr__(self):
        return f"<MenuItem {self.id}: {self.name} ({self.category})>"
