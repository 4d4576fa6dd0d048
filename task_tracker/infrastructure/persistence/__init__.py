"""Relational persistence: engine/session wiring, ORM models, repositories."""
