from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas import HealthResponse, SchemaStatus
from ..storage.initializer import TABLE_CREATORS, missing_tables, read_table_names

router = APIRouter(tags=["status"])

# Health check endpoint (unauthenticated)
@router.get("/health", response_model=HealthResponse)
def health_check():
    return {"status": "healthy"}

@router.get("/schema", response_model=SchemaStatus)
def schema_status(request: Request, db: Session = Depends(get_db)):
    """
    Report which managed tables exist in the store
    """
    present = read_table_names(db.connection())
    missing = missing_tables(present)
    return SchemaStatus(
        managed_tables=list(TABLE_CREATORS),
        present_tables=sorted(present),
        missing_tables=missing,
        initialized=not missing,
        created_on_startup=getattr(request.app.state, "schema_created", False),
    )
