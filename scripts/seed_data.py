import sys
from decimal import Decimal
from pathlib import Path

from sqlalchemy import select

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from crm.core.startup import bootstrap
from crm.database.db import get_db_session
from crm.models import Company
from crm.models.enums import DealStatus
from crm.schemas.companies import CompanyCreateRequest
from crm.schemas.customers import CustomerCreateRequest
from crm.schemas.deals import DealCreateRequest
from crm.services.company_service import CompanyService
from crm.services.customer_service import CustomerService
from crm.services.deal_service import DealService

SEED_COMPANY = "Acme Corporation"


def seed() -> None:
    with get_db_session() as session:
        existing = session.scalars(select(Company).where(Company.name == SEED_COMPANY)).first()
        if existing:
            print(f"Seed company already exists (id={existing.id}).")
            return

        company = CompanyService(db=session).create_company(
            CompanyCreateRequest(
                name=SEED_COMPANY,
                industry="Manufacturing",
                website="https://acme.example.com",
                phone="555-0100",
                address="1 Industrial Way",
            )
        )
        customer = CustomerService(db=session).create_customer(
            CustomerCreateRequest(name="Ada Lovelace", email="ada@acme.example.com", company_id=company.id)
        )
        deal = DealService(db=session).create_deal(
            DealCreateRequest(
                description="Annual analytics engine licence",
                amount=Decimal("12345.67"),
                status=DealStatus.QUALIFIED,
                customer_id=customer.id,
                company_id=company.id,
            )
        )
        print(f"Seeded company {company.id}, customer {customer.id}, deal {deal.id}.")


if __name__ == "__main__":
    bootstrap()
    seed()
