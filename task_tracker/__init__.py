"""Task tracker: CRUD task-management backend (FastAPI + SQLAlchemy)."""

__version__ = "1.0.0"
