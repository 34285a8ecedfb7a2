from datetime import date
from pydantic import BaseModel, ConfigDict, Field


class GameBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    genre: list[str] = Field(default_factory=list)
    platform: str = Field(..., max_length=100)
    explore: list[str] = Field(default_factory=list)
    release_date: date | None = None
    developer: list[str] = Field(default_factory=list)
    publisher: str = Field(..., max_length=255)
    description: str = ""
    esrb_rating: str = Field(..., max_length=20, description="Content rating, e.g. E, T, M")


class Game(GameBase):
    model_config = ConfigDict(from_attributes=True)

    id: str


class GameCreate(GameBase):
    pass


class GameReplace(GameBase):
    pass
