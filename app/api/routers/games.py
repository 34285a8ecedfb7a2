from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
import app.repositories.game as game_repo
from app.schemas.game import Game, GameCreate, GameReplace
from app.schemas.pagination import PaginatedResponse
from app.errors import NotFoundError

router = APIRouter(prefix="/games", tags=["games"])


@router.post("", response_model=Game, status_code=status.HTTP_201_CREATED)
def create_new_game(
    game_data: GameCreate,
    db: Session = Depends(get_db),
):
    """
    Add a game to the catalog.
    """
    game = game_repo.create_game(db, **game_data.model_dump())
    return Game.model_validate(game)


@router.get("", response_model=PaginatedResponse[Game])
def get_all_games(
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    page_size: int = Query(100, ge=1, le=1000, description="Number of items per page"),
    title: str | None = Query(None, description="Filter by title substring (case-insensitive)"),
    platform: str | None = Query(None, description="Filter by platform"),
    db: Session = Depends(get_db),
):
    """
    Get all games with pagination, sorted by title.
    """
    games, total = game_repo.get_all_games_paginated(
        db, page=page, page_size=page_size, title=title, platform=platform
    )
    return PaginatedResponse(
        items=[Game.model_validate(game) for game in games],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/{game_id}", response_model=Game)
def get_game_by_id(
    game_id: str,
    db: Session = Depends(get_db),
):
    game = game_repo.get_game_by_id(db, game_id)
    if not game:
        raise NotFoundError("Game not found")
    return Game.model_validate(game)


@router.put("/{game_id}", response_model=Game)
def replace_game_by_id(
    game_id: str,
    game_data: GameReplace,
    db: Session = Depends(get_db),
):
    """
    Replace a game in the catalog.
    """
    game = game_repo.replace_game(db, game_id, **game_data.model_dump())
    return Game.model_validate(game)


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_game_by_id(
    game_id: str,
    db: Session = Depends(get_db),
):
    """
    Delete a game. Contracts that reference it keep their game_id.
    """
    game_repo.delete_game(db, game_id)
