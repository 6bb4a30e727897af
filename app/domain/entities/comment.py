from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field


"""
Comment Entity:
1. id (str): Unique identifier for the comment. Generated when the comment is added.
2. user_id (str): Identifier of the user who wrote the comment. Cannot be empty.
3. text (str): The content of the comment. Can be empty.
4. created_at (datetime): UTC timestamp of creation.
Comments are owned by a single playlist and never change after creation.
"""
class Comment(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    text: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
