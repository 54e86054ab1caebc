from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from backend.app.db.base import Base
from backend.app.db.session import engine
from backend.app.main import app


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def register_and_login(client: TestClient, email: str, password: str) -> str:
    client.post("/auth/register", json={"email": email, "password": password})
    resp = client.post("/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200
    return resp.json()["access_token"]


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def headers(client):
    token = register_and_login(client, "office@example.com", "secret")
    return {"Authorization": f"Bearer {token}"}


def test_reference_routes_require_token(client):
    for path in ("/organisations", "/companies", "/agreements", "/projects", "/units", "/vat_rates", "/products"):
        assert client.get(path).status_code == 401


def test_organisation_lifecycle_with_bank_accounts(client, headers):
    resp = client.post("/organisations", json={"name": "Acme", "is_vat_payer": True}, headers=headers)
    assert resp.status_code == 201
    organisation = resp.json()
    assert organisation["is_vat_payer"] is True

    account = client.post(
        f"/organisations/{organisation['id']}/bank_accounts",
        json={"name": "Main account", "is_default": True},
        headers=headers,
    )
    assert account.status_code == 201
    assert account.json()["organisation_id"] == organisation["id"]

    accounts = client.get(f"/organisations/{organisation['id']}/bank_accounts", headers=headers)
    assert [row["name"] for row in accounts.json()] == ["Main account"]

    assert client.get(f"/organisations/{organisation['id']}", headers=headers).json()["name"] == "Acme"
    deleted = client.delete(f"/organisations/{organisation['id']}", headers=headers)
    assert deleted.json() == {"message": "organisation successfully deleted"}
    assert client.get(f"/organisations/{organisation['id']}", headers=headers).status_code == 404


def test_bank_account_of_other_organisation_is_404(client, headers):
    first = client.post("/organisations", json={"name": "Acme"}, headers=headers).json()
    second = client.post("/organisations", json={"name": "Initech"}, headers=headers).json()
    account = client.post(
        f"/organisations/{first['id']}/bank_accounts", json={"name": "Main"}, headers=headers
    ).json()
    resp = client.delete(f"/organisations/{second['id']}/bank_accounts/{account['id']}", headers=headers)
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Bank account not found"}


def test_organisation_name_length_is_validated(client, headers):
    resp = client.post("/organisations", json={"name": "x" * 51}, headers=headers)
    assert resp.status_code == 422
    assert "name" in resp.json()["errors"]


def test_company_search_matches_name_and_full_name(client, headers):
    client.post("/companies", json={"name": "Globex", "full_name": "Globex Corporation"}, headers=headers)
    client.post("/companies", json={"name": "Initrode", "full_name": "Initech Holdings"}, headers=headers)
    client.post("/companies", json={"name": "Umbrella"}, headers=headers)

    resp = client.get("/companies/search", params={"q": "INIT"}, headers=headers)
    assert resp.status_code == 200
    assert [row["name"] for row in resp.json()] == ["Initrode"]

    resp = client.get("/companies/search", params={"q": "corp"}, headers=headers)
    assert resp.json() == [{"id": 1, "name": "Globex"}]


def test_company_search_requires_query(client, headers):
    resp = client.get("/companies/search", headers=headers)
    assert resp.status_code == 422
    assert "q" in resp.json()["errors"]


def test_agreement_requires_existing_company(client, headers):
    resp = client.post("/agreements", json={"name": "Frame contract", "company_id": 42}, headers=headers)
    assert resp.status_code == 422
    assert resp.json()["errors"] == {"company_id": "company does not exist"}

    company = client.post("/companies", json={"name": "Globex"}, headers=headers).json()
    resp = client.post(
        "/agreements",
        json={"name": "Frame contract", "company_id": company["id"], "start_at": "2024-01-01"},
        headers=headers,
    )
    assert resp.status_code == 201
    assert resp.json()["start_at"] == "2024-01-01"

    listed = client.get("/agreements", params={"company_id": company["id"]}, headers=headers)
    assert [row["name"] for row in listed.json()] == ["Frame contract"]


def test_catalog_product_with_unit_and_vat_rate(client, headers):
    unit = client.post("/units", json={"code": "kg", "name": "Kilogram"}, headers=headers).json()
    vat_rate = client.post("/vat_rates", json={"name": "Standard", "rate": "20.00"}, headers=headers).json()
    resp = client.post(
        "/products",
        json={"name": "Flour", "price": "1.25", "unit_id": unit["id"], "vat_rate_id": vat_rate["id"]},
        headers=headers,
    )
    assert resp.status_code == 201
    product = resp.json()
    assert product["unit_id"] == unit["id"]

    assert len(client.get("/products", headers=headers).json()) == 1
    assert client.get(f"/units/{unit['id']}", headers=headers).json()["code"] == "kg"
    assert client.get("/vat_rates/0", headers=headers).status_code == 404


def test_product_with_unknown_unit_is_rejected(client, headers):
    resp = client.post("/products", json={"name": "Flour", "unit_id": 99}, headers=headers)
    assert resp.status_code == 422
    assert resp.json()["errors"] == {"unit_id": "unit does not exist"}


def test_product_used_on_invoice_cannot_be_deleted(client, headers):
    organisation = client.post("/organisations", json={"name": "Acme"}, headers=headers).json()
    company = client.post("/companies", json={"name": "Globex"}, headers=headers).json()
    product = client.post("/products", json={"name": "Widget"}, headers=headers).json()
    client.post(
        "/invoices",
        json={
            "organisation_id": organisation["id"],
            "company_id": company["id"],
            "invoice_items": [{"product_id": product["id"], "amount": "1"}],
        },
        headers=headers,
    )

    resp = client.delete(f"/products/{product['id']}", headers=headers)
    assert resp.status_code == 422
    assert "id" in resp.json()["errors"]
    assert client.get(f"/products/{product['id']}", headers=headers).status_code == 200


def test_deleting_unit_returns_message(client, headers):
    unit = client.post("/units", json={"name": "Pieces"}, headers=headers).json()
    resp = client.delete(f"/units/{unit['id']}", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "unit successfully deleted"}
    assert client.delete(f"/units/{unit['id']}", headers=headers).status_code == 404


def test_bank_account_show_and_patch_are_scoped_to_organisation(client, headers):
    first = client.post("/organisations", json={"name": "Acme"}, headers=headers).json()
    second = client.post("/organisations", json={"name": "Initech"}, headers=headers).json()
    account = client.post(
        f"/organisations/{first['id']}/bank_accounts", json={"name": "Main"}, headers=headers
    ).json()

    shown = client.get(f"/organisations/{first['id']}/bank_accounts/{account['id']}", headers=headers)
    assert shown.status_code == 200
    assert shown.json()["name"] == "Main"

    foreign = client.get(f"/organisations/{second['id']}/bank_accounts/{account['id']}", headers=headers)
    assert foreign.status_code == 404
    assert foreign.json() == {"detail": "Bank account not found"}
    assert client.get(f"/organisations/0/bank_accounts/{account['id']}", headers=headers).status_code == 404

    resp = client.patch(
        f"/organisations/{first['id']}/bank_accounts/{account['id']}",
        json={"is_default": True},
        headers=headers,
    )
    assert resp.status_code == 200
    assert resp.json()["is_default"] is True
    assert resp.json()["name"] == "Main"

    resp = client.patch(
        f"/organisations/{second['id']}/bank_accounts/{account['id']}", json={"name": "Stolen"}, headers=headers
    )
    assert resp.status_code == 404


def test_patch_organisation_keeps_unsent_fields(client, headers):
    organisation = client.post(
        "/organisations", json={"name": "Acme", "full_name": "Acme Ltd", "is_vat_payer": True}, headers=headers
    ).json()
    resp = client.patch(f"/organisations/{organisation['id']}", json={"name": "Acme Group"}, headers=headers)
    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "Acme Group"
    assert data["full_name"] == "Acme Ltd"
    assert data["is_vat_payer"] is True

    cleared = client.patch(
        f"/organisations/{organisation['id']}", json={"full_name": None, "name": None}, headers=headers
    )
    assert cleared.status_code == 200
    assert cleared.json()["full_name"] is None
    assert cleared.json()["name"] == "Acme Group"


def test_patch_validates_like_create(client, headers):
    organisation = client.post("/organisations", json={"name": "Acme"}, headers=headers).json()
    resp = client.patch(f"/organisations/{organisation['id']}", json={"name": ""}, headers=headers)
    assert resp.status_code == 422
    assert "name" in resp.json()["errors"]

    vat_rate = client.post("/vat_rates", json={"name": "Standard", "rate": "20.00"}, headers=headers).json()
    resp = client.patch(f"/vat_rates/{vat_rate['id']}", json={"rate": "-1"}, headers=headers)
    assert resp.status_code == 422
    assert "rate" in resp.json()["errors"]

    assert client.patch("/units/999", json={"name": "Box"}, headers=headers).status_code == 404


def test_patch_company_and_agreement(client, headers):
    company = client.post("/companies", json={"name": "Globex"}, headers=headers).json()
    other = client.post("/companies", json={"name": "Umbrella"}, headers=headers).json()
    resp = client.patch(f"/companies/{company['id']}", json={"full_name": "Globex Corporation"}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["full_name"] == "Globex Corporation"
    assert resp.json()["name"] == "Globex"

    agreement = client.post(
        "/agreements", json={"name": "Frame", "company_id": company["id"]}, headers=headers
    ).json()
    moved = client.patch(f"/agreements/{agreement['id']}", json={"company_id": other["id"]}, headers=headers)
    assert moved.status_code == 200
    assert moved.json()["company_id"] == other["id"]

    resp = client.patch(f"/agreements/{agreement['id']}", json={"company_id": 999}, headers=headers)
    assert resp.status_code == 422
    assert resp.json()["errors"] == {"company_id": "company does not exist"}


def test_patch_catalog_entries(client, headers):
    unit = client.post("/units", json={"code": "kg", "name": "Kilogram"}, headers=headers).json()
    vat_rate = client.post("/vat_rates", json={"name": "Standard", "rate": "20.00"}, headers=headers).json()
    product = client.post(
        "/products",
        json={"name": "Flour", "unit_id": unit["id"], "vat_rate_id": vat_rate["id"]},
        headers=headers,
    ).json()

    assert client.patch(f"/units/{unit['id']}", json={"code": "KG"}, headers=headers).json()["code"] == "KG"
    resp = client.patch(f"/vat_rates/{vat_rate['id']}", json={"rate": "21.00", "is_default": True}, headers=headers)
    assert resp.status_code == 200
    assert Decimal(resp.json()["rate"]) == Decimal("21.00")
    assert resp.json()["is_default"] is True

    resp = client.patch(f"/products/{product['id']}", json={"price": "2.50", "unit_id": None}, headers=headers)
    assert resp.status_code == 200
    assert Decimal(resp.json()["price"]) == Decimal("2.50")
    assert resp.json()["unit_id"] is None
    assert resp.json()["vat_rate_id"] == vat_rate["id"]

    resp = client.patch(f"/products/{product['id']}", json={"vat_rate_id": 77}, headers=headers)
    assert resp.status_code == 422
    assert resp.json()["errors"] == {"vat_rate_id": "vat rate does not exist"}
