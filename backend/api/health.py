"""
Health check API route
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from constants import HTTPStatus, ServiceInfo
from database import get_db
from dtos.response.health_response import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check(db: Session = Depends(get_db)):
    """Health check endpoint; verifies the database answers SELECT 1."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: {e}")
        raise HTTPException(
            status_code=HTTPStatus.SERVICE_UNAVAILABLE,
            detail="Database unavailable"
        )
    return HealthResponse(
        status="ok",
        service=ServiceInfo.NAME,
        version=ServiceInfo.VERSION,
        database="connected",
    )
