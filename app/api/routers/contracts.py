from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
import app.repositories.contract as contract_repo
from app.domain.contract_status import ContractStatus
from app.services.contract import (
    activate_contract,
    cancel_contract,
    complete_contract,
    create_contract,
    delete_contract,
    get_contract,
    replace_contract,
    search_contracts,
)
from app.schemas.contract import Contract, ContractCreate, ContractReplace
from app.schemas.pagination import PaginatedResponse

router = APIRouter(prefix="/contracts", tags=["contracts"])


@router.post("", response_model=Contract, status_code=status.HTTP_201_CREATED)
def create_new_contract(
    contract_data: ContractCreate,
    db: Session = Depends(get_db),
):
    """
    Create a new rental contract. Status defaults to Pending.
    """
    contract = create_contract(db, contract_data)
    return Contract.model_validate(contract)


@router.get("", response_model=PaginatedResponse[Contract])
def get_all_contracts(
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    page_size: int = Query(100, ge=1, le=1000, description="Number of items per page"),
    contract_status: ContractStatus | None = Query(
        None, alias="status", description="Filter contracts by status"
    ),
    db: Session = Depends(get_db),
):
    """
    Get all contracts with pagination and an optional status filter.
    """
    contracts, total = contract_repo.get_all_contracts_paginated(
        db,
        page=page,
        page_size=page_size,
        status=contract_status.value if contract_status is not None else None,
    )

    return PaginatedResponse(
        items=[Contract.model_validate(contract) for contract in contracts],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/search", response_model=list[Contract])
def search_all_contracts(
    term: str | None = Query(
        None,
        description="Matches game title, account username, or customer name/email/address/phone",
    ),
    db: Session = Depends(get_db),
):
    """
    Search contracts with a free-text term (case-insensitive).

    Without a term, or with a blank one, every contract is returned.
    """
    return search_contracts(db, term)


@router.get("/{contract_id}", response_model=Contract)
def get_contract_by_id(
    contract_id: str,
    db: Session = Depends(get_db),
):
    """
    Get a contract by ID.
    """
    return Contract.model_validate(get_contract(db, contract_id))


@router.put("/{contract_id}", response_model=Contract)
def replace_contract_by_id(
    contract_id: str,
    contract_data: ContractReplace,
    db: Session = Depends(get_db),
):
    """
    Replace a contract. Fields not included in the request are cleared.
    """
    contract = replace_contract(db, contract_id, contract_data)
    return Contract.model_validate(contract)


@router.delete("/{contract_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contract_by_id(
    contract_id: str,
    db: Session = Depends(get_db),
):
    """
    Delete a contract by ID.
    """
    delete_contract(db, contract_id)


@router.post("/{contract_id}/activate", response_model=Contract)
def activate_contract_by_id(contract_id: str, db: Session = Depends(get_db)):
    """Move a pending contract to Active."""
    return Contract.model_validate(activate_contract(db, contract_id))


@router.post("/{contract_id}/complete", response_model=Contract)
def complete_contract_by_id(contract_id: str, db: Session = Depends(get_db)):
    """Move an active contract to Completed."""
    return Contract.model_validate(complete_contract(db, contract_id))


@router.post("/{contract_id}/cancel", response_model=Contract)
def cancel_contract_by_id(contract_id: str, db: Session = Depends(get_db)):
    """Cancel a pending or active contract."""
    return Contract.model_validate(cancel_contract(db, contract_id))
