"""
Userbase: user accounts service.

Application package root. A modular monolith using hexagonal
architecture (ports & adapters).

Bounded contexts:
    - users: Accounts, password hashing, credential checks.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (SQLAlchemy, bcrypt) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
