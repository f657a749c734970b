from sqlalchemy import Column, Integer, String

from app.database import Base


class Category(Base):
    """Product category. Only referenced by products.category_id."""
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"
