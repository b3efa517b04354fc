"""
Orphanage API — Child SQLAlchemy Model
=======================================

What:  ORM model representing the `child` table.
Why:   Declares the column set and order the store binds write statements in.

`history` holds free-text notes about the child and is required like every
other non-id column.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from orphanage.database import Base


class Child(Base):
    __tablename__ = "child"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    history: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Child(id={self.id}, name='{self.name}', age={self.age})>"
