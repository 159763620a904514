from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel


class Interaction(SQLModel, table=True):
    __tablename__ = "interactions"

    id: Optional[int] = Field(default=None, primary_key=True)
    file_name: Optional[str] = None
    file_category: Optional[str] = None
    file_content: Optional[str] = None
    query: str
    response: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
