import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.db.models.game import Game as GameModel
from app.errors import NotFoundError
from app.repositories.store import store_operation

logger = logging.getLogger(__name__)

GAME_FIELDS = (
    "title",
    "genre",
    "platform",
    "explore",
    "release_date",
    "developer",
    "publisher",
    "description",
    "esrb_rating",
)


def get_game_by_id(db: Session, game_id: str) -> GameModel | None:
    """Get a game by ID."""
    with store_operation(db, logger, "get game"):
        logger.info("Querying game with id: %s", game_id)
        return db.query(GameModel).filter(GameModel.id == game_id).first()


def get_games_by_title_substring(db: Session, substring: str) -> list[GameModel]:
    """
    Get games whose title contains ``substring``, case-insensitively.

    Case is folded in Python so non-ASCII titles match on every backend
    (SQLite's lower() only folds ASCII).
    """
    needle = substring.lower()
    with store_operation(db, logger, "list games"):
        logger.info("Querying games with title containing: %s", substring)
        games = [
            game
            for game in db.query(GameModel).all()
            if game.title and needle in game.title.lower()
        ]
        logger.info("Retrieved %d games from database", len(games))
        return games


def get_all_games_paginated(
    db: Session,
    page: int = 1,
    page_size: int = 100,
    title: str | None = None,
    platform: str | None = None,
) -> tuple[list[GameModel], int]:
    """
    Get all games with pagination and optional filters, sorted by title.

    Args:
        page: Page number (1-indexed)
        page_size: Number of items per page
        title: Optional case-insensitive title substring
        platform: Optional exact platform

    Returns:
        Tuple of (list of games, total count)
    """
    with store_operation(db, logger, "list games"):
        query = db.query(GameModel)

        if title:
            query = query.filter(
                func.lower(GameModel.title).contains(title.strip().lower(), autoescape=True)
            )
        if platform is not None:
            query = query.filter(GameModel.platform == platform)

        total = query.count()
        skip = (page - 1) * page_size
        games = (
            query.order_by(GameModel.title, GameModel.id)
            .offset(skip)
            .limit(page_size)
            .all()
        )
        return games, total


def create_game(db: Session, **fields) -> GameModel:
    """Create a new game in the database. Pure data access - no business logic."""
    with store_operation(db, logger, "create game"):
        logger.info("Creating new game")
        db_game = GameModel(**{k: v for k, v in fields.items() if k in GAME_FIELDS})
        db.add(db_game)
        db.commit()
        db.refresh(db_game)
        logger.info("Created new game with id: %s", db_game.id)
        return db_game


def replace_game(db: Session, game_id: str, **fields) -> GameModel:
    """Replace every field of a game."""
    game = get_game_by_id(db, game_id)
    if not game:
        raise NotFoundError("Game not found")

    with store_operation(db, logger, "replace game"):
        logger.info("Updating game with id: %s", game_id)
        for field in GAME_FIELDS:
            setattr(game, field, fields.get(field))
        db.commit()
        db.refresh(game)
        return game


def delete_game(db: Session, game_id: str) -> None:
    """Delete a game from the database. Contracts referencing it are left as they are."""
    game = get_game_by_id(db, game_id)
    if not game:
        raise NotFoundError("Game not found")

    with store_operation(db, logger, "delete game"):
        logger.info("Removing game with id: %s", game_id)
        db.delete(game)
        db.commit()
