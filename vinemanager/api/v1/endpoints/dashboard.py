from fastapi import APIRouter

from vinemanager.core.deps import CurrentStore
from vinemanager.schemas.dashboard import DashboardRead
from vinemanager.services.dashboard import get_dashboard

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardRead)
async def dashboard(store: CurrentStore):
    return get_dashboard(store)
