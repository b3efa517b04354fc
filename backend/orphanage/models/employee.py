"""
Orphanage API — Employee SQLAlchemy Model
==========================================

What:  ORM model representing the `employee` table.
Why:   Declares the column set and order the store binds write statements in.
Who:   Registered on Base.metadata; created by Store.start().

Table Design:
    - INTEGER primary key: SQLite rowid alias, assigned by the store on insert
    - name, role, salary: required (NOT NULL), so an insert missing any of
      them is rejected by the store as a constraint violation
    - No indexes beyond the primary key, no foreign keys
"""

from sqlalchemy import Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from orphanage.database import Base


class Employee(Base):
    """A staff member of the orphanage."""

    __tablename__ = "employee"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[str] = mapped_column(Text, nullable=False)
    salary: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, name='{self.name}', role='{self.role}')>"
