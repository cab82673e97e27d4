from pydantic import BaseModel

class GroupCount(BaseModel):
    key: str
    count: int
