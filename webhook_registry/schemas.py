from typing import List

from pydantic import BaseModel

class HealthResponse(BaseModel):
    status: str

class SchemaStatus(BaseModel):
    managed_tables: List[str]
    present_tables: List[str]
    missing_tables: List[str]
    initialized: bool
    created_on_startup: bool = False
