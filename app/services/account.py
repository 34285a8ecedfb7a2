from sqlalchemy.orm import Session

import app.repositories.account as account_repo
import app.repositories.contract as contract_repo
from app.db.models.account import Account as AccountModel
from app.db.models.contract import Contract as ContractModel
from app.errors import DuplicateResourceError, NotFoundError


def create_account(db: Session, username: str, contract_ids: list[str]) -> AccountModel:
    """
    Create an account with domain validation.

    Raises:
        DuplicateResourceError: If the username is already taken
    """
    if account_repo.get_account_by_username(db, username):
        raise DuplicateResourceError(f"An account with username {username} already exists")
    return account_repo.create_account(db, username=username, contract_ids=contract_ids)


def replace_account(
    db: Session, account_id: str, username: str, contract_ids: list[str]
) -> AccountModel:
    """
    Replace an account with domain validation.

    Raises:
        NotFoundError: If account doesn't exist
        DuplicateResourceError: If another account already uses the username
    """
    account = account_repo.get_account_by_id(db, account_id)
    if not account:
        raise NotFoundError("Account not found")

    if account_repo.get_account_by_username(db, username, exclude_id=account_id):
        raise DuplicateResourceError(f"An account with username {username} already exists")

    return account_repo.replace_account(
        db, account_id, username=username, contract_ids=contract_ids
    )


def list_contracts_for_account(db: Session, account_id: str) -> list[ContractModel]:
    """
    List the contracts referenced by an account.

    Ids that no longer resolve to a contract are skipped.
    """
    account = account_repo.get_account_by_id(db, account_id)
    if not account:
        raise NotFoundError("Account not found")
    return contract_repo.get_contracts_by_ids(db, list(account.contract_ids or []))
