from sqlalchemy.orm import Session


# ============================================================================
# CREATE ACCOUNT TESTS
# ============================================================================


def test_create_account_success(client, db: Session):
    response = client.post(
        "/api/v1/accounts", json={"username": "retro_gamer", "contract_ids": ["c1"]}
    )
    assert response.status_code == 201
    data = response.json()
    assert data["username"] == "retro_gamer"
    assert data["contract_ids"] == ["c1"]
    assert "id" in data


def test_create_account_defaults_to_no_contracts(client, db: Session):
    response = client.post("/api/v1/accounts", json={"username": "newbie"})
    assert response.status_code == 201
    assert response.json()["contract_ids"] == []


def test_create_account_duplicate_username(client, db: Session, account_factory):
    account_factory("retro_gamer")
    response = client.post("/api/v1/accounts", json={"username": "retro_gamer"})
    assert response.status_code == 409
    data = response.json()
    assert data["code"] == "DUPLICATE_RESOURCE"
    assert "already exists" in data["detail"]


def test_create_account_empty_username_fails(client, db: Session):
    response = client.post("/api/v1/accounts", json={"username": ""})
    assert response.status_code == 422


# ============================================================================
# GET / LIST ACCOUNT TESTS
# ============================================================================


def test_list_accounts_sorted_by_username(client, db: Session, account_factory):
    account_factory("zelda_fan")
    account_factory("alice")
    response = client.get("/api/v1/accounts")
    assert response.status_code == 200
    assert [a["username"] for a in response.json()] == ["alice", "zelda_fan"]


def test_get_account_not_found(client, db: Session):
    response = client.get("/api/v1/accounts/missing")
    assert response.status_code == 404


def test_get_accounts_by_username_substring(db: Session, account_factory):
    from app.repositories.account import get_accounts_by_username_substring

    match = account_factory("SpeedRunner")
    account_factory("casual")
    assert [a.id for a in get_accounts_by_username_substring(db, "runner")] == [match.id]


def test_get_account_contracts(client, db: Session, account_factory, contract_factory):
    """Test that ids without a stored contract are skipped."""
    first = contract_factory(customer_info={"name": "Alice"})
    contract_factory()
    account = account_factory("alice", contract_ids=[first.id, "gone"])

    response = client.get(f"/api/v1/accounts/{account.id}/contracts")
    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == [first.id]


def test_get_account_contracts_not_found(client, db: Session):
    response = client.get("/api/v1/accounts/missing/contracts")
    assert response.status_code == 404


# ============================================================================
# REPLACE / DELETE ACCOUNT TESTS
# ============================================================================


def test_replace_account(client, db: Session, account_factory):
    account = account_factory("alice", contract_ids=["c1"])
    response = client.put(
        f"/api/v1/accounts/{account.id}",
        json={"username": "alice_l", "contract_ids": ["c1", "c2"]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["username"] == "alice_l"
    assert data["contract_ids"] == ["c1", "c2"]


def test_replace_account_keeps_own_username(client, db: Session, account_factory):
    account = account_factory("alice")
    response = client.put(f"/api/v1/accounts/{account.id}", json={"username": "alice"})
    assert response.status_code == 200


def test_replace_account_username_taken(client, db: Session, account_factory):
    account_factory("bob")
    account = account_factory("alice")
    response = client.put(f"/api/v1/accounts/{account.id}", json={"username": "bob"})
    assert response.status_code == 409


def test_replace_account_not_found(client, db: Session):
    response = client.put("/api/v1/accounts/missing", json={"username": "ghost"})
    assert response.status_code == 404


def test_delete_account(client, db: Session, account_factory):
    account = account_factory("alice")
    response = client.delete(f"/api/v1/accounts/{account.id}")
    assert response.status_code == 204
    assert client.get(f"/api/v1/accounts/{account.id}").status_code == 404
