import logging
import sys
from pathlib import Path

import streamlit as st
from pydantic import ValidationError as SchemaValidationError

# Ensure project root is importable when running `streamlit run crm/dashboard.py`
PROJECT_ROOT = Path(__file__).resolve().parents[1]
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

from crm.core.exceptions import CRMException
from crm.core.startup import bootstrap
from crm.database.db import get_db_session
from crm.models.enums import DealStatus
from crm.schemas.companies import CompanyCreateRequest, CompanyResponse, CompanyUpdateRequest
from crm.schemas.customers import CustomerCreateRequest, CustomerResponse, CustomerUpdateRequest
from crm.schemas.deals import DealCreateRequest, DealResponse, DealUpdateRequest
from crm.services.company_service import CompanyService
from crm.services.customer_service import CustomerService
from crm.services.deal_service import DealService
from crm.utils.frames import changed_fields, pipeline_summary, records_to_frame, with_names
from crm.utils.validators import blank_to_none

logger = logging.getLogger("crm.dashboard")


@st.cache_resource
def _bootstrap_once() -> bool:
    bootstrap()
    return True


def _run(action, success_message: str) -> None:
    """Run a service call; failures stay on the page, successes reload it."""
    try:
        action()
    except (CRMException, SchemaValidationError) as exc:
        logger.warning("dashboard.action_failed", extra={"event": "dashboard.action_failed", "detail": str(exc)})
        st.error(str(exc))
        return
    st.session_state["flash"] = success_message
    st.rerun()


def _show_flash() -> None:
    message = st.session_state.pop("flash", None)
    if message:
        st.success(message)


def _confirm_delete(key: str, label: str, action, success_message: str) -> None:
    """Two-step delete: the first click arms a confirmation prompt."""
    pending = f"{key}_pending"
    if not st.session_state.get(pending):
        if st.button(f"Delete {label}", key=key):
            st.session_state[pending] = True
            st.rerun()
        return
    st.warning(f"This will permanently delete {label}. Are you sure?")
    confirm, cancel = st.columns(2)
    if confirm.button("Yes, delete", key=f"{key}_confirm", type="primary"):
        st.session_state.pop(pending, None)
        _run(action, success_message)
    if cancel.button("Cancel", key=f"{key}_cancel"):
        st.session_state.pop(pending, None)
        st.rerun()


def _load(service_cls, method: str, schema) -> list:
    with get_db_session() as session:
        rows = getattr(service_cls(db=session), method)()
        return [schema.model_validate(row) for row in rows]


def _with_service(service_cls, method: str, *args):
    def action():
        with get_db_session() as session:
            getattr(service_cls(db=session), method)(*args)

    return action


def companies_tab() -> None:
    companies = _load(CompanyService, "list_companies", CompanyResponse)
    st.dataframe(records_to_frame(companies, CompanyResponse), use_container_width=True)

    with st.form("company_create", clear_on_submit=True):
        st.markdown("**New company**")
        name = st.text_input("Name")
        industry = st.text_input("Industry")
        website = st.text_input("Website")
        phone = st.text_input("Phone")
        address = st.text_area("Address")
        if st.form_submit_button("Create company"):
            _run(
                lambda: _with_service(
                    CompanyService,
                    "create_company",
                    CompanyCreateRequest(
                        name=name.strip(),
                        industry=blank_to_none(industry),
                        website=blank_to_none(website),
                        phone=blank_to_none(phone),
                        address=blank_to_none(address),
                    ),
                )(),
                "Company created.",
            )

    if not companies:
        return

    by_id = {company.id: company for company in companies}
    selected = st.selectbox(
        "Company", list(by_id), format_func=lambda company_id: by_id[company_id].name, key="company_select"
    )
    current = by_id[selected]
    with st.form(f"company_edit_{selected}"):
        edited = {
            "name": st.text_input("Name", value=current.name).strip(),
            "industry": blank_to_none(st.text_input("Industry", value=current.industry or "")),
            "website": blank_to_none(st.text_input("Website", value=current.website or "")),
            "phone": blank_to_none(st.text_input("Phone", value=current.phone or "")),
            "address": blank_to_none(st.text_area("Address", value=current.address or "")),
        }
        if st.form_submit_button("Save changes"):
            changes = changed_fields(current.model_dump(), edited)
            _run(
                lambda: _with_service(
                    CompanyService, "update_company", selected, CompanyUpdateRequest(**changes)
                )(),
                "Company updated.",
            )
    _confirm_delete(
        f"company_delete_{selected}",
        f"company \"{current.name}\"",
        _with_service(CompanyService, "delete_company", selected),
        "Company deleted.",
    )


def customers_tab() -> None:
    customers = _load(CustomerService, "list_customers", CustomerResponse)
    companies = {company.id: company.name for company in _load(CompanyService, "list_companies", CompanyResponse)}
    frame = with_names(records_to_frame(customers, CustomerResponse), "company_id", companies, "company")
    st.dataframe(frame, use_container_width=True)

    if not companies:
        st.info("Create a company before adding customers.")
        return

    with st.form("customer_create", clear_on_submit=True):
        st.markdown("**New customer**")
        name = st.text_input("Name")
        email = st.text_input("Email")
        phone = st.text_input("Phone")
        company_id = st.selectbox("Company", list(companies), format_func=companies.get)
        if st.form_submit_button("Create customer"):
            _run(
                lambda: _with_service(
                    CustomerService,
                    "create_customer",
                    CustomerCreateRequest(
                        name=name.strip(),
                        email=email.strip(),
                        phone=blank_to_none(phone),
                        company_id=company_id,
                    ),
                )(),
                "Customer created.",
            )

    if not customers:
        return

    by_id = {customer.id: customer for customer in customers}
    selected = st.selectbox(
        "Customer", list(by_id), format_func=lambda customer_id: by_id[customer_id].name, key="customer_select"
    )
    current = by_id[selected]
    company_ids = list(companies)
    with st.form(f"customer_edit_{selected}"):
        edited = {
            "name": st.text_input("Name", value=current.name).strip(),
            "email": st.text_input("Email", value=current.email).strip(),
            "phone": blank_to_none(st.text_input("Phone", value=current.phone or "")),
            "company_id": st.selectbox(
                "Company",
                company_ids,
                index=company_ids.index(current.company_id) if current.company_id in companies else 0,
                format_func=companies.get,
            ),
        }
        if st.form_submit_button("Save changes"):
            changes = changed_fields(current.model_dump(), edited)
            _run(
                lambda: _with_service(
                    CustomerService, "update_customer", selected, CustomerUpdateRequest(**changes)
                )(),
                "Customer updated.",
            )
    _confirm_delete(
        f"customer_delete_{selected}",
        f"customer \"{current.name}\"",
        _with_service(CustomerService, "delete_customer", selected),
        "Customer deleted.",
    )


def deals_tab() -> None:
    deals = _load(DealService, "list_deals", DealResponse)
    customers = {customer.id: customer.name for customer in _load(CustomerService, "list_customers", CustomerResponse)}
    companies = {company.id: company.name for company in _load(CompanyService, "list_companies", CompanyResponse)}
    summary = pipeline_summary(deals)
    count_col, won_col, total_col = st.columns(3)
    count_col.metric("Deals", summary["count"])
    won_col.metric("Won", f"${summary['won_total']:,.2f}")
    total_col.metric("Pipeline total", f"${summary['total']:,.2f}")

    frame = records_to_frame(deals, DealResponse)
    frame = with_names(frame, "customer_id", customers, "customer")
    frame = with_names(frame, "company_id", companies, "company")
    st.dataframe(frame, use_container_width=True)

    if not customers or not companies:
        st.info("Create a company and a customer before adding deals.")
        return

    statuses = [status.value for status in DealStatus]
    with st.form("deal_create", clear_on_submit=True):
        st.markdown("**New deal**")
        description = st.text_area("Description")
        amount = st.number_input("Amount", min_value=0.01, value=1000.0, step=100.0, format="%.2f")
        status = st.selectbox("Status", statuses)
        customer_id = st.selectbox("Customer", list(customers), format_func=customers.get)
        company_id = st.selectbox("Company", list(companies), format_func=companies.get)
        if st.form_submit_button("Create deal"):
            _run(
                lambda: _with_service(
                    DealService,
                    "create_deal",
                    DealCreateRequest(
                        description=description.strip(),
                        amount=amount,
                        status=status,
                        customer_id=customer_id,
                        company_id=company_id,
                    ),
                )(),
                "Deal created.",
            )

    if not deals:
        return

    by_id = {deal.id: deal for deal in deals}
    selected = st.selectbox(
        "Deal", list(by_id), format_func=lambda deal_id: f"#{deal_id} {by_id[deal_id].description[:40]}", key="deal_select"
    )
    current = by_id[selected]
    customer_ids = list(customers)
    company_ids = list(companies)
    with st.form(f"deal_edit_{selected}"):
        edited = {
            "description": st.text_area("Description", value=current.description).strip(),
            "amount": st.number_input("Amount", min_value=0.01, value=current.amount, step=100.0, format="%.2f"),
            "status": st.selectbox("Status", statuses, index=statuses.index(current.status.value)),
            "customer_id": st.selectbox(
                "Customer",
                customer_ids,
                index=customer_ids.index(current.customer_id) if current.customer_id in customers else 0,
                format_func=customers.get,
            ),
            "company_id": st.selectbox(
                "Company",
                company_ids,
                index=company_ids.index(current.company_id) if current.company_id in companies else 0,
                format_func=companies.get,
            ),
        }
        if st.form_submit_button("Save changes"):
            original = current.model_dump()
            original["status"] = current.status.value
            changes = changed_fields(original, edited)
            _run(
                lambda: _with_service(DealService, "update_deal", selected, DealUpdateRequest(**changes))(),
                "Deal updated.",
            )
    _confirm_delete(
        f"deal_delete_{selected}",
        f"deal #{selected}",
        _with_service(DealService, "delete_deal", selected),
        "Deal deleted.",
    )


st.set_page_config(page_title="CRM", layout="wide")
_bootstrap_once()

st.title("CRM")
_show_flash()

companies_view, customers_view, deals_view = st.tabs(["Companies", "Customers", "Deals"])
with companies_view:
    companies_tab()
with customers_view:
    customers_tab()
with deals_view:
    deals_tab()
