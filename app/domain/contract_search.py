"""Free-text search over rental contracts.

A contract matches a term when any of these holds (case-insensitive):
- the title of the game it rents contains the term
- an account whose username contains the term lists the contract's id
- the embedded customer's name, email, address or phone number contains the term

Games and accounts are expected to be pre-filtered by the store, but they are
checked again here so the join gives the same answer on unfiltered input.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")

CUSTOMER_SEARCH_FIELDS = ("name", "email", "address", "phone_number")


def normalize_search_term(term: str | None) -> str | None:
    """Trim and lower-case a term. Blank terms normalize to None."""
    if term is None:
        return None
    normalized = term.strip().lower()
    if not normalized:
        return None
    return normalized


def _contains(value: str | None, normalized_term: str) -> bool:
    # Absent values never match
    if not value:
        return False
    return normalized_term in value.lower()


def matching_game_ids(games: Iterable, normalized_term: str) -> set[str]:
    return {
        game.id
        for game in games
        if game.id is not None and _contains(game.title, normalized_term)
    }


def matching_account_contract_ids(accounts: Iterable, normalized_term: str) -> set[str]:
    contract_ids: set[str] = set()
    for account in accounts:
        if account is None or not _contains(account.username, normalized_term):
            continue
        contract_ids.update(str(contract_id) for contract_id in account.contract_ids or ())
    return contract_ids


def customer_matches(customer, normalized_term: str) -> bool:
    if customer is None:
        return False
    return any(
        _contains(getattr(customer, field, None), normalized_term)
        for field in CUSTOMER_SEARCH_FIELDS
    )


def search(
    term: str | None,
    contracts: Sequence[T],
    games: Iterable,
    accounts: Iterable,
) -> list[T]:
    """Return the contracts matching ``term``, or all of them for a blank term.

    Storage order is preserved in both cases.
    """
    normalized_term = normalize_search_term(term)
    if normalized_term is None:
        return list(contracts)

    game_ids = matching_game_ids(games, normalized_term)
    account_contract_ids = matching_account_contract_ids(accounts, normalized_term)

    return [
        contract
        for contract in contracts
        if (contract.game_id is not None and contract.game_id in game_ids)
        or (contract.id is not None and str(contract.id) in account_contract_ids)
        or customer_matches(contract.customer_info, normalized_term)
    ]
