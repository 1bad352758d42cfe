from sqlalchemy import Boolean, Column, Integer, String, Text
from phrasesync.core.db import Base


class PhraseRecord(Base):
    __tablename__ = "phrases"
    id = Column(Integer, primary_key=True)
    project_id = Column(Integer, nullable=False, index=True)
    language_id = Column(String(16), nullable=False)
    phrase_key = Column(String(255), nullable=False)
    enabled = Column(Boolean, nullable=False, default=True)
    payload = Column(Text, nullable=False, default="")
