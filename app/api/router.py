from fastapi import APIRouter

from app.api.routes import content, game

api_router = APIRouter()
api_router.include_router(game.router)
api_router.include_router(content.router)
