from fastapi import APIRouter

from app.api.routers import accounts, contracts, games

api_router = APIRouter()

api_router.include_router(games.router)
api_router.include_router(accounts.router)
api_router.include_router(contracts.router)
