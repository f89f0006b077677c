"""Infrastructure layer - External dependencies and implementations.

This layer contains:
- Database adapters (SQLAlchemy)
- API routes (FastAPI)
- Password hashing and JWT issuance
- Background jobs

It implements the store interfaces defined in the domain layer.
"""
