from fastapi import APIRouter

from vbapi.api.employees import employee_router
from vbapi.api.staff import staff_router

api_router = APIRouter()
api_router.include_router(employee_router)
api_router.include_router(staff_router)
