from pydantic import BaseModel, Field


class ProjectData(BaseModel):
    """Stored project metadata needed to build a Project"""
    name: str
    visibility: int
    default_language: str = Field(min_length=1)
