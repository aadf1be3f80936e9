from fastapi import APIRouter

from vinemanager.api.v1.endpoints import assistant, dashboard, plots, schedules, tasks, weather

api_router = APIRouter()

api_router.include_router(plots.router)
api_router.include_router(schedules.router)
api_router.include_router(schedules.plot_schedules_router)
api_router.include_router(tasks.router)
api_router.include_router(weather.router)
api_router.include_router(assistant.router)
api_router.include_router(dashboard.router)
