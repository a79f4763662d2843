from fastapi import APIRouter

from staffboard.api.endpoints import board, employees, health

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(board.router)
api_router.include_router(employees.router)
