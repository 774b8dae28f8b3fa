from sqlalchemy import Column, String, Integer, Boolean, DateTime, JSON, Text

from string_analyzer.database import Base


class StringAnalysis(Base):
    __tablename__ = "string_analyses"

    # Insertion order; the hash is not unique across inputs (" madam" vs "madam")
    seq = Column(Integer, primary_key=True, autoincrement=True)
    value = Column(Text, unique=True, nullable=False, index=True)
    length = Column(Integer, nullable=False)
    is_palindrome = Column(Boolean, nullable=False)
    unique_characters = Column(Integer, nullable=False)
    word_count = Column(Integer, nullable=False)
    sha256_hash = Column(String(64), nullable=False, index=True)
    character_frequency_map = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
