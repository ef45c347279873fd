"""CRM service: companies, customers and deals."""
