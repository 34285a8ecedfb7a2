from app.db.models.game import Game
from app.db.models.account import Account
from app.db.models.contract import Contract

__all__ = ["Game", "Account", "Contract"]
