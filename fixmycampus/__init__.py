"""Fix My Campus API.

A FastAPI application where students report campus issues, propose
solutions, comment and upvote:
- RESTful CRUD operations for issues, comments and solutions
- SQLAlchemy ORM with async support (SQLite or PostgreSQL)
- Slack notifications for new issues
"""
