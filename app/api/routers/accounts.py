from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
import app.repositories.account as account_repo
from app.services.account import create_account, list_contracts_for_account, replace_account
from app.schemas.account import Account, AccountCreate, AccountReplace
from app.schemas.contract import Contract
from app.errors import NotFoundError

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post("", response_model=Account, status_code=status.HTTP_201_CREATED)
def create_new_account(
    account_data: AccountCreate,
    db: Session = Depends(get_db),
):
    """
    Create an account. Usernames must be unique.
    """
    account = create_account(
        db, username=account_data.username, contract_ids=account_data.contract_ids
    )
    return Account.model_validate(account)


@router.get("", response_model=list[Account])
def get_all_accounts(db: Session = Depends(get_db)):
    accounts = account_repo.get_all_accounts(db)
    return [Account.model_validate(account) for account in accounts]


@router.get("/{account_id}", response_model=Account)
def get_account_by_id(
    account_id: str,
    db: Session = Depends(get_db),
):
    account = account_repo.get_account_by_id(db, account_id)
    if not account:
        raise NotFoundError("Account not found")
    return Account.model_validate(account)


@router.get("/{account_id}/contracts", response_model=list[Contract])
def get_account_contracts(
    account_id: str,
    db: Session = Depends(get_db),
):
    """
    Get the contracts rented through an account.
    """
    contracts = list_contracts_for_account(db, account_id)
    return [Contract.model_validate(contract) for contract in contracts]


@router.put("/{account_id}", response_model=Account)
def replace_account_by_id(
    account_id: str,
    account_data: AccountReplace,
    db: Session = Depends(get_db),
):
    """
    Replace an account's username and contract list.
    """
    account = replace_account(
        db,
        account_id,
        username=account_data.username,
        contract_ids=account_data.contract_ids,
    )
    return Account.model_validate(account)


@router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_account_by_id(
    account_id: str,
    db: Session = Depends(get_db),
):
    account_repo.delete_account(db, account_id)
