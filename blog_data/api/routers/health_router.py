from fastapi import APIRouter, Depends, Response, status

from blog_data.database import Database
from blog_data.deps import get_database

router = APIRouter()


@router.get("/health")
def health(response: Response, database: Database = Depends(get_database)) -> dict:
    if database.is_connected:
        return {"status": "ok", "database": "connected"}
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return {"status": "unavailable", "database": "disconnected"}
