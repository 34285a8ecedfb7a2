import logging

from sqlalchemy.orm import Session

from app.db.models.contract import Contract as ContractModel
from app.errors import NotFoundError
from app.repositories.store import store_operation

logger = logging.getLogger(__name__)

CONTRACT_FIELDS = (
    "game_id",
    "status",
    "customer_info",
    "start_date",
    "end_date",
    "payment_method",
    "shipment_method",
    "shipping_fee",
    "late_fee",
    "total_cost",
)


def get_all_contracts(db: Session) -> list[ContractModel]:
    """Get all contracts in storage order."""
    with store_operation(db, logger, "list contracts"):
        logger.info("Querying contracts collection in database")
        contracts = db.query(ContractModel).all()
        logger.info("Retrieved %d contracts from database", len(contracts))
        return contracts


def get_contract_by_id(db: Session, contract_id: str) -> ContractModel | None:
    """Get a contract by ID."""
    with store_operation(db, logger, "get contract"):
        logger.info("Querying contract with id: %s", contract_id)
        return db.query(ContractModel).filter(ContractModel.id == contract_id).first()


def get_contracts_by_ids(db: Session, contract_ids: list[str]) -> list[ContractModel]:
    """Get the contracts whose id is in ``contract_ids``, in storage order."""
    if not contract_ids:
        return []
    with store_operation(db, logger, "list contracts by id"):
        return db.query(ContractModel).filter(ContractModel.id.in_(contract_ids)).all()


def get_all_contracts_paginated(
    db: Session,
    page: int = 1,
    page_size: int = 100,
    status: str | None = None,
) -> tuple[list[ContractModel], int]:
    """
    Get all contracts with pagination and an optional status filter.

    Args:
        page: Page number (1-indexed)
        page_size: Number of items per page
        status: Optional filter by contract status

    Returns:
        Tuple of (list of contracts, total count)
    """
    with store_operation(db, logger, "list contracts"):
        query = db.query(ContractModel)

        if status is not None:
            query = query.filter(ContractModel.status == status)

        total = query.count()
        skip = (page - 1) * page_size
        contracts = (
            query.order_by(ContractModel.start_date.desc(), ContractModel.id)
            .offset(skip)
            .limit(page_size)
            .all()
        )
        return contracts, total


def create_contract(db: Session, **fields) -> ContractModel:
    """Create a new contract in the database. Pure data access - no business logic."""
    with store_operation(db, logger, "create contract"):
        logger.info("Creating new contract")
        db_contract = ContractModel(**{k: v for k, v in fields.items() if k in CONTRACT_FIELDS})
        db.add(db_contract)
        db.commit()
        db.refresh(db_contract)
        logger.info("Created new contract with id: %s", db_contract.id)
        return db_contract


def replace_contract(db: Session, contract_id: str, **fields) -> ContractModel:
    """
    Replace every field of a contract. Fields not provided are cleared.
    """
    contract = get_contract_by_id(db, contract_id)
    if not contract:
        raise NotFoundError("Contract not found")

    with store_operation(db, logger, "replace contract"):
        logger.info("Updating contract with id: %s", contract_id)
        for field in CONTRACT_FIELDS:
            setattr(contract, field, fields.get(field))
        db.commit()
        db.refresh(contract)
        logger.info("Updated contract with id: %s", contract_id)
        return contract


def set_contract_status(db: Session, contract_id: str, status: str) -> ContractModel:
    """Set the status of a contract. Pure data access - no transition rules."""
    contract = get_contract_by_id(db, contract_id)
    if not contract:
        raise NotFoundError("Contract not found")

    with store_operation(db, logger, "update contract status"):
        logger.info("Updating contract with id: %s", contract_id)
        contract.status = status
        db.commit()
        db.refresh(contract)
        logger.info("Updated contract with id: %s to status %s", contract_id, status)
        return contract


def delete_contract(db: Session, contract_id: str) -> None:
    """Delete a contract from the database. Pure data access - no business logic."""
    contract = get_contract_by_id(db, contract_id)
    if not contract:
        raise NotFoundError("Contract not found")

    with store_operation(db, logger, "delete contract"):
        logger.info("Removing contract with id: %s", contract_id)
        db.delete(contract)
        db.commit()
        logger.info("Removed contract with id: %s", contract_id)
