"""
Target CPA Calculator Package.

Works out how much a business can pay to acquire one customer from lifetime
profit, acquisition budget share and conversion rate, and keeps a history of
saved calculations.

Subpackages:
    - api: FastAPI route handlers and error handlers
    - core: Configuration, database, and dependencies
    - models: Pydantic schemas, enums and the shared API contract
    - services: Derivation, formatting and storage services
    - sql: Parameterized SQL statements
    - client: Python client (state store, local storage, save action)
"""

__version__ = "1.0.0"
