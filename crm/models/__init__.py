"""SQLAlchemy model package for the CRM schema."""

from crm.models.base import Base
from crm.models.company import Company
from crm.models.customer import Customer
from crm.models.deal import Deal
from crm.models.enums import DealStatus

__all__ = [
    "Base",
    "Company",
    "Customer",
    "Deal",
    "DealStatus",
]
