from __future__ import annotations

from decimal import Decimal


def dec(value) -> Decimal:
    return Decimal(str(value))


FORMULATION = {
    "ingredients": [
        {"name": "Corn", "percent": "60", "price_kg": "1"},
        {"name": "Soybean meal", "percent": "40", "price_kg": "2"},
    ],
    "avg_weight_kg": "400",
    "head_count": 10,
    "pv_percent": "1.0",
    "operational": {"labor": "900"},
}


async def test_global_daily_cost_round_trip(client, headers):
    initial = await client.get("/api/v1/costs/config", headers=headers)
    assert initial.status_code == 200
    assert dec(initial.json()["global_daily_cost"]) == Decimal("0")

    saved = await client.put("/api/v1/costs/daily-cost", json={"daily_cost": "3"}, headers=headers)
    assert saved.status_code == 200
    assert saved.json()["lot_id"] is None

    config = await client.get("/api/v1/costs/config", headers=headers)
    assert dec(config.json()["global_daily_cost"]) == Decimal("3")


async def test_daily_cost_for_unknown_lot(client, headers):
    response = await client.put(
        "/api/v1/costs/daily-cost",
        json={"daily_cost": "3", "lot_id": "00000000-0000-0000-0000-000000000002"},
        headers=headers,
    )
    assert response.status_code == 404
    assert response.json()["code"] == "not_found"


async def test_feed_formulation_over_limit_is_rejected(client, headers):
    payload = {
        **FORMULATION,
        "ingredients": [
            *FORMULATION["ingredients"],
            {"name": "Urea", "percent": "10", "price_kg": "5"},
        ],
    }
    response = await client.post("/api/v1/costs/feed-formulation", json=payload, headers=headers)
    assert response.status_code == 422
    body = response.json()
    assert body["code"] == "validation_error"
    assert body["details"] == {"total_percent": "110", "limit": "100"}


async def test_lot_flow_with_formulation_and_batch_sale(client, headers):
    lot = await client.post("/api/v1/lots/", json={"name": "Feedlot A"}, headers=headers)
    assert lot.status_code == 201
    lot_id = lot.json()["id"]
    assert lot.json()["daily_cost"] is None

    duplicate = await client.post("/api/v1/lots/", json={"name": "feedlot a"}, headers=headers)
    assert duplicate.status_code == 409

    formulation = await client.post(
        "/api/v1/costs/feed-formulation", json={**FORMULATION, "lot_id": lot_id}, headers=headers
    )
    assert formulation.status_code == 200
    saved = formulation.json()
    assert dec(saved["cost_per_kg_mix"]) == Decimal("1.4")
    assert dec(saved["saved_daily_cost"]) == Decimal("8.6")

    batch = await client.post(
        "/api/v1/animals/batch",
        json={
            "quantity": 3,
            "tag_prefix": "FA-",
            "entry_date": "2024-01-01",
            "weight_value": "300",
            "price_value": "2500",
            "lot_id": lot_id,
        },
        headers=headers,
    )
    assert batch.status_code == 201

    lots = await client.get("/api/v1/lots/", headers=headers)
    [card] = lots.json()
    assert card["head_count"] == 3
    assert dec(card["avg_weight_kg"]) == Decimal("300")
    assert dec(card["daily_cost"]) == Decimal("8.6")

    sale = await client.post(
        f"/api/v1/lots/{lot_id}/sale",
        json={"sale_date": "2024-01-31", "pricing_mode": "per_head", "price": "5000"},
        headers=headers,
    )
    assert sale.status_code == 200
    result = sale.json()
    assert result["head_count"] == 3
    assert dec(result["revenue"]) == Decimal("15000")
    assert dec(result["purchase_total"]) == Decimal("7500")
    assert dec(result["holding_cost_total"]) == Decimal("774")
    assert dec(result["net_profit"]) == Decimal("6726")
    assert len(result["sold_animal_ids"]) == 3

    empty_again = await client.post(
        f"/api/v1/lots/{lot_id}/sale",
        json={"sale_date": "2024-02-01", "pricing_mode": "per_head", "price": "5000"},
        headers=headers,
    )
    assert empty_again.status_code == 422

    dashboard = await client.get(
        "/api/v1/dashboard/summary", params={"date": "2024-01-31"}, headers=headers
    )
    assert dashboard.status_code == 200
    summary = dashboard.json()
    assert summary["active_animals"] == 0
    assert dec(summary["income"]) == Decimal("15000")
    assert dec(summary["expense"]) == Decimal("7500") + Decimal("774")
    assert dec(summary["balance"]) == Decimal("6726")
    assert [c["category"] for c in summary["top_expenses"]] == ["Animal purchase", "Holding costs"]
    assert len(summary["cash_flow"]) == 6
    assert dec(summary["cash_flow"][-1]["income"]) == Decimal("15000")


async def test_update_lot(client, headers):
    lot = await client.post(
        "/api/v1/lots/", json={"name": "Feedlot B", "daily_cost": "3"}, headers=headers
    )
    lot_id = lot.json()["id"]
    await client.post("/api/v1/lots/", json={"name": "Pasture"}, headers=headers)

    renamed = await client.put(
        f"/api/v1/lots/{lot_id}",
        json={"name": "Feedlot East", "description": "Finishing pens"},
        headers=headers,
    )
    assert renamed.status_code == 200
    body = renamed.json()
    assert body["name"] == "Feedlot East"
    assert body["description"] == "Finishing pens"
    assert dec(body["daily_cost"]) == Decimal("3")

    cleared = await client.put(
        f"/api/v1/lots/{lot_id}", json={"clear_daily_cost": True}, headers=headers
    )
    assert cleared.json()["daily_cost"] is None

    clash = await client.put(f"/api/v1/lots/{lot_id}", json={"name": "pasture"}, headers=headers)
    assert clash.status_code == 409

    missing = await client.put(
        "/api/v1/lots/00000000-0000-0000-0000-000000000003",
        json={"name": "Ghost"},
        headers=headers,
    )
    assert missing.status_code == 404
