from pydantic import BaseModel
from typing import Dict, List, Optional

class ColumnStats(BaseModel):
    count: int
    mean: float
    min: float
    max: float

class TableSummary(BaseModel):
    rows: int
    numeric_columns: Optional[List[str]] = None
    stats: Optional[Dict[str, ColumnStats]] = None
