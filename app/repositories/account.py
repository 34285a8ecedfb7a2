import logging

from sqlalchemy.orm import Session

from app.db.models.account import Account as AccountModel
from app.errors import NotFoundError
from app.repositories.store import store_operation

logger = logging.getLogger(__name__)


def get_account_by_id(db: Session, account_id: str) -> AccountModel | None:
    """Get an account by ID."""
    with store_operation(db, logger, "get account"):
        logger.info("Querying account with id: %s", account_id)
        return db.query(AccountModel).filter(AccountModel.id == account_id).first()


def get_account_by_username(
    db: Session, username: str, exclude_id: str | None = None
) -> AccountModel | None:
    """Get an account by exact username. Used to check for duplicates."""
    with store_operation(db, logger, "get account"):
        query = db.query(AccountModel).filter(AccountModel.username == username)
        if exclude_id is not None:
            query = query.filter(AccountModel.id != exclude_id)
        return query.first()


def get_accounts_by_username_substring(db: Session, substring: str) -> list[AccountModel]:
    """
    Get accounts whose username contains ``substring``, case-insensitively.

    Case is folded in Python so non-ASCII usernames match on every backend.
    """
    needle = substring.lower()
    with store_operation(db, logger, "list accounts"):
        logger.info("Querying accounts with username containing: %s", substring)
        accounts = [
            account
            for account in db.query(AccountModel).all()
            if account.username and needle in account.username.lower()
        ]
        logger.info("Retrieved %d accounts from database", len(accounts))
        return accounts


def get_all_accounts(db: Session) -> list[AccountModel]:
    """Get all accounts, sorted by username."""
    with store_operation(db, logger, "list accounts"):
        return db.query(AccountModel).order_by(AccountModel.username).all()


def create_account(db: Session, username: str, contract_ids: list[str]) -> AccountModel:
    """Create a new account in the database. Pure data access - no business logic."""
    with store_operation(db, logger, "create account"):
        logger.info("Creating new account")
        db_account = AccountModel(username=username, contract_ids=list(contract_ids))
        db.add(db_account)
        db.commit()
        db.refresh(db_account)
        logger.info("Created new account with id: %s", db_account.id)
        return db_account


def replace_account(
    db: Session, account_id: str, username: str, contract_ids: list[str]
) -> AccountModel:
    """Replace the username and contract list of an account."""
    account = get_account_by_id(db, account_id)
    if not account:
        raise NotFoundError("Account not found")

    with store_operation(db, logger, "replace account"):
        logger.info("Updating account with id: %s", account_id)
        account.username = username
        # Assign a new list so the JSON column is flagged as changed
        account.contract_ids = list(contract_ids)
        db.commit()
        db.refresh(account)
        return account


def delete_account(db: Session, account_id: str) -> None:
    """Delete an account from the database. Pure data access - no business logic."""
    account = get_account_by_id(db, account_id)
    if not account:
        raise NotFoundError("Account not found")

    with store_operation(db, logger, "delete account"):
        logger.info("Removing account with id: %s", account_id)
        db.delete(account)
        db.commit()
