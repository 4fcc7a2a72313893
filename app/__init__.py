"""FastAPI Issue Tracker Application.

A small FastAPI application for reporting issues with:
- Server-rendered pages (dashboard, issues list, new issue form)
- A create-issue REST endpoint validated with pydantic
- SQLAlchemy ORM with async support
"""
