import logging

from pydantic import ValidationError
from sqlalchemy.orm import Session

import app.repositories.account as account_repo
import app.repositories.contract as contract_repo
import app.repositories.game as game_repo
from app.db.models.contract import Contract as ContractModel
from app.domain.contract_search import normalize_search_term, search
from app.domain.contract_status import ContractStatus, ContractStatusPolicy
from app.errors import DomainValidationError, NotFoundError, StoreAccessError
from app.schemas.account import Account
from app.schemas.contract import Contract, ContractCreate, ContractReplace
from app.schemas.game import Game

logger = logging.getLogger(__name__)


def _to_fields(contract_data: ContractCreate | ContractReplace) -> dict:
    """Flatten a contract payload into repository fields."""
    fields = contract_data.model_dump(exclude={"customer_info", "status"})
    fields["status"] = contract_data.status.value
    fields["customer_info"] = (
        contract_data.customer_info.model_dump()
        if contract_data.customer_info is not None
        else None
    )
    return fields


def _ensure_transition_allowed(current: str, target: ContractStatus) -> None:
    """Raise DomainValidationError unless ContractStatusPolicy allows the move."""
    policy = ContractStatusPolicy()
    if policy.is_final(current):
        raise DomainValidationError(
            f"Contract is already {current} and cannot change status"
        )
    if not policy.can_transition(current=current, target=target):
        raise DomainValidationError(
            f"Cannot change contract status from {current} to {target.value}"
        )


def get_contract(db: Session, contract_id: str) -> ContractModel:
    contract = contract_repo.get_contract_by_id(db, contract_id)
    if not contract:
        raise NotFoundError("Contract not found")
    return contract


def create_contract(db: Session, contract_data: ContractCreate) -> ContractModel:
    """
    Create a new rental contract.

    The referenced game is stored as given; its existence is not checked.
    """
    return contract_repo.create_contract(db, **_to_fields(contract_data))


def replace_contract(
    db: Session, contract_id: str, contract_data: ContractReplace
) -> ContractModel:
    """
    Replace a contract as a whole. Omitted optional fields are cleared.

    A changed status must follow the same lifecycle as the status endpoints.

    Raises:
        NotFoundError: If contract doesn't exist
        DomainValidationError: If the status change is not allowed
    """
    contract = get_contract(db, contract_id)
    if contract.status != contract_data.status.value:
        _ensure_transition_allowed(contract.status, contract_data.status)
    return contract_repo.replace_contract(db, contract_id, **_to_fields(contract_data))


def delete_contract(db: Session, contract_id: str) -> None:
    contract_repo.delete_contract(db, contract_id)


def change_contract_status(
    db: Session, contract_id: str, target: ContractStatus
) -> ContractModel:
    """
    Move a contract to ``target`` status.

    - Validates contract exists
    - Validates the transition is allowed (ContractStatusPolicy)

    Raises:
        NotFoundError: If contract doesn't exist
        DomainValidationError: If the transition is not allowed
    """
    contract = get_contract(db, contract_id)
    _ensure_transition_allowed(contract.status, target)
    return contract_repo.set_contract_status(db, contract_id, target.value)


def activate_contract(db: Session, contract_id: str) -> ContractModel:
    return change_contract_status(db, contract_id, ContractStatus.ACTIVE)


def complete_contract(db: Session, contract_id: str) -> ContractModel:
    return change_contract_status(db, contract_id, ContractStatus.COMPLETED)


def cancel_contract(db: Session, contract_id: str) -> ContractModel:
    return change_contract_status(db, contract_id, ContractStatus.CANCELED)


def _validate_records(schema, records, operation: str, term: str | None) -> list:
    """Validate stored rows; a malformed row is a store failure for ``operation``."""
    try:
        return [schema.model_validate(record) for record in records]
    except ValidationError as e:
        raise StoreAccessError(operation, search_term=term) from e


def search_contracts(db: Session, term: str | None) -> list[Contract]:
    """
    Search contracts by game title, account username or customer details.

    A blank or missing term returns every contract in storage order. Any store
    failure, including a malformed stored record, fails the whole search; no
    partial results are returned.

    Raises:
        StoreAccessError: If one of the reads fails, annotated with the term
    """
    try:
        contracts = _validate_records(
            Contract, contract_repo.get_all_contracts(db), "list contracts", term
        )

        normalized_term = normalize_search_term(term)
        if normalized_term is None:
            return contracts

        games = _validate_records(
            Game,
            game_repo.get_games_by_title_substring(db, normalized_term),
            "list games",
            term,
        )
        accounts = _validate_records(
            Account,
            account_repo.get_accounts_by_username_substring(db, normalized_term),
            "list accounts",
            term,
        )
    except StoreAccessError as e:
        if e.search_term is not None:
            raise
        raise StoreAccessError(e.operation, search_term=term) from e

    results = search(normalized_term, contracts, games, accounts)
    logger.info("Search for %r matched %d of %d contracts", term, len(results), len(contracts))
    return results
