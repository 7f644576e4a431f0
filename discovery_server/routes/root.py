"""Root, health, and algorithm config endpoints."""

from fastapi import APIRouter

from discovery import RISING_DESCRIPTION, TRENDING_DESCRIPTION

from ..state import get_state

router = APIRouter()

SERVICE_NAME = "Beatstage Discovery API"
SERVICE_VERSION = "1.0.0"


@router.get("/")
def root():
    state = get_state()
    return {
        "name": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "data_source": state.config.data_source,
        "endpoints": {
            "discovery": ["/api/recordings/trending", "/api/users/rising-talent"],
            "service": ["/api/health", "/api/algorithm"],
        },
    }


@router.get("/api/health")
def health():
    state = get_state()
    return {"status": "healthy", "store": state.store_name}


@router.get("/api/algorithm")
def get_algorithm():
    """Active trending and rising configs."""
    state = get_state()
    return {
        "trending": {
            "description": TRENDING_DESCRIPTION,
            "config": state.trending_config.model_dump(),
        },
        "rising": {
            "description": RISING_DESCRIPTION,
            "config": state.rising_config.model_dump(),
        },
    }
