"""Service layer: validation and persistence for issues, comments and solutions."""

from fixmycampus.services import comments, issues, solutions

__all__ = ["comments", "issues", "solutions"]
