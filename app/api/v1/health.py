import logging

from fastapi import APIRouter, HTTPException

from ...database.gateway import run_query

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health():
    """存活检查"""
    return {"ok": True}


@router.get("/health/db")
def health_db():
    """数据库连接检查"""
    try:
        run_query("SELECT 1")
    except Exception:
        logger.exception("Database health check failed")
        raise HTTPException(status_code=503, detail="Database connection failed")
    return {"ok": True}
