from fastapi import APIRouter

from staffboard.api.v1.endpoints import dashboard, departments, employees, health, notifications, reviews, roles

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router)
api_router.include_router(employees.router)
api_router.include_router(roles.router)
api_router.include_router(departments.router)
api_router.include_router(reviews.router)
api_router.include_router(dashboard.router)
api_router.include_router(notifications.router)
