from sqlalchemy import Column, String, Integer, Text, DateTime, Index
from sqlalchemy.sql import func
from infra.db.session import Base


class AnalysisRecord(Base):
    __tablename__ = "analyses"
    id = Column(String, primary_key=True)
    user_id = Column(String, nullable=False)
    career_goal = Column(String, nullable=False)
    resume_score = Column(Integer, nullable=False)
    payload = Column(Text, nullable=False)   # AnalysisResult as JSON
    timestamp = Column(String, nullable=False)   # ISO-8601, sorts chronologically
    created_at = Column(DateTime, server_default=func.now())

    __table_args__ = (Index("ix_analyses_user_timestamp", "user_id", "timestamp"),)
