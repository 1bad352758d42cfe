from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional


class PhraseRow(BaseModel):
    """Raw phrase row as returned by a phrase store"""
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    language_id: str
    phrase_key: str = Field(min_length=1)
    enabled: bool = True
    payload: str = ""

    @field_validator('language_id', mode='before')
    @classmethod
    def stringify_language_id(cls, v):
        if isinstance(v, int):
            return str(v)
        return v

