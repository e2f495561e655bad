from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, Text

from fixmycampus.database.config import Base

CATEGORIES = ("registration", "advising", "accessibility", "tech")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Issue(Base):
    __tablename__ = "issues"

    id = Column(String, primary_key=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(Enum(*CATEGORIES, name="issue_category"), nullable=False, index=True)
    upvotes = Column(Integer, nullable=False, default=0, server_default="0")

    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column("updatedAt", DateTime(timezone=True), nullable=False, default=utcnow)


class Comment(Base):
    __tablename__ = "comments"

    id = Column(String, primary_key=True)
    content = Column(Text, nullable=False)
    issue_id = Column(
        "issueId", String, ForeignKey("issues.id", ondelete="CASCADE"), nullable=False, index=True
    )

    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, default=utcnow)


class Solution(Base):
    __tablename__ = "solutions"

    id = Column(String, primary_key=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    issue_id = Column(
        "issueId", String, ForeignKey("issues.id", ondelete="CASCADE"), nullable=False, index=True
    )
    upvotes = Column(Integer, nullable=False, default=0, server_default="0")

    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, default=utcnow)
