from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlmodel import Session

from app.database import get_session
from app.utils.clock import utc_now

router = APIRouter()

@router.get("/check")
def health_check(session: Session = Depends(get_session)):
    db_status = "ok"

    try:
        # simple DB ping
        session.execute(text("SELECT 1"))
    except Exception:
        db_status = "failed"

    return {
        "status": "ok",
        "database": db_status,
        "timestamp": utc_now().isoformat()
    }
