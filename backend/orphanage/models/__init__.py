# Models package init
"""
Orphanage API — ORM Models
===========================

Importing this package registers both tables on Base.metadata.
"""

from orphanage.models.child import Child
from orphanage.models.employee import Employee

__all__ = ["Child", "Employee"]
