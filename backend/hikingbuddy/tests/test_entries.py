"""
Tests for hike entry endpoints.
"""
import pytest
from conftest import entry_payload


def entries_url(hike):
    return f"/api/hikes/{hike['id']}/entries"


def test_create_entry(client, auth_headers, hike):
    response = client.post(entries_url(hike), json=entry_payload(), headers=auth_headers)
    assert response.status_code == 201
    entry = response.json()
    assert entry["hikeId"] == hike["id"]
    assert entry["moneySpent"] == 40
    assert entry["weatherTemp"] == "Mild"
    assert entry["expenses"] == [
        {"category": "Food", "amount": 30},
        {"category": "Pre-Hike", "amount": 10}
    ]
    assert entry["locationFrom"] == {"name": "", "lat": None, "lng": None}


def test_client_money_spent_is_ignored(client, auth_headers, hike):
    response = client.post(entries_url(hike), json=entry_payload(moneySpent=999), headers=auth_headers)
    assert response.status_code == 201
    assert response.json()["moneySpent"] == 40


def test_entry_defaults(client, auth_headers, hike):
    payload = entry_payload(expenses=[], caloriesSpent=0)
    del payload["kmTravelled"]
    del payload["notes"]
    response = client.post(entries_url(hike), json=payload, headers=auth_headers)
    assert response.status_code == 201
    entry = response.json()
    assert entry["kmTravelled"] == 0
    assert entry["caloriesSpent"] == 0
    assert entry["notes"] == ""
    assert entry["moneySpent"] == 0


def test_entry_locations(client, auth_headers, hike):
    payload = entry_payload(
        locationFrom={"name": "Milngavie", "lat": 55.94, "lng": -4.31},
        locationTo={"name": "Drymen", "lat": 56.06, "lng": -4.45}
    )
    entry = client.post(entries_url(hike), json=payload, headers=auth_headers).json()
    assert entry["locationFrom"]["name"] == "Milngavie"
    assert entry["locationTo"]["lng"] == -4.45


@pytest.mark.parametrize("field", [
    "date", "rpe", "mood", "sleepQuality", "overallFeeling",
    "caloriesSpent", "weatherTemp", "weatherType", "expenses"
])
def test_required_entry_fields(client, auth_headers, hike, field):
    payload = entry_payload()
    del payload[field]
    response = client.post(entries_url(hike), json=payload, headers=auth_headers)
    assert response.status_code == 422


@pytest.mark.parametrize("overrides", [
    {"rpe": 0},
    {"mood": 11},
    {"kmTravelled": -1},
    {"caloriesSpent": -10},
    {"weatherTemp": "Warm"},
    {"weatherType": "Fog"},
    {"expenses": [{"category": "Snacks", "amount": 5}]},
    {"expenses": [{"category": "Food", "amount": -5}]},
    {"expenses": "Food"},
])
def test_invalid_entry_values(client, auth_headers, hike, overrides):
    response = client.post(entries_url(hike), json=entry_payload(**overrides), headers=auth_headers)
    assert response.status_code == 422


def test_entry_on_someone_elses_hike(client, hike, other_auth_headers):
    response = client.post(entries_url(hike), json=entry_payload(), headers=other_auth_headers)
    assert response.status_code == 404


def test_list_entries_sorted_and_filtered(client, auth_headers, hike):
    for day in ("2024-06-03", "2024-06-01", "2024-06-02"):
        client.post(entries_url(hike), json=entry_payload(date=day), headers=auth_headers)
    
    response = client.get(entries_url(hike), headers=auth_headers)
    assert [e["date"] for e in response.json()] == ["2024-06-01", "2024-06-02", "2024-06-03"]
    
    response = client.get(entries_url(hike), params={"date": "2024-06-02"}, headers=auth_headers)
    assert [e["date"] for e in response.json()] == ["2024-06-02"]


def test_list_entries_scoped_to_owner(client, auth_headers, hike, other_auth_headers):
    client.post(entries_url(hike), json=entry_payload(), headers=auth_headers)
    response = client.get(entries_url(hike), headers=other_auth_headers)
    assert response.status_code == 200
    assert response.json() == []


def test_update_entry_replaces_expenses(client, auth_headers, hike):
    entry = client.post(entries_url(hike), json=entry_payload(), headers=auth_headers).json()
    url = f"{entries_url(hike)}/{entry['id']}"
    
    response = client.put(
        url,
        json={"expenses": [{"category": "Accommodation", "amount": 55}], "moneySpent": 1},
        headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["moneySpent"] == 55
    assert response.json()["expenses"] == [{"category": "Accommodation", "amount": 55}]
    
    # Other fields leave expenses and their total alone
    response = client.put(url, json={"mood": 3, "notes": "Rain all day"}, headers=auth_headers)
    body = response.json()
    assert body["mood"] == 3
    assert body["notes"] == "Rain all day"
    assert body["moneySpent"] == 55


def test_update_entry_validation_and_not_found(client, auth_headers, hike, other_auth_headers):
    entry = client.post(entries_url(hike), json=entry_payload(), headers=auth_headers).json()
    url = f"{entries_url(hike)}/{entry['id']}"
    
    assert client.put(url, json={"rpe": 12}, headers=auth_headers).status_code == 422
    assert client.put(url, json={"mood": 4}, headers=other_auth_headers).status_code == 404
    assert client.put(f"{entries_url(hike)}/9999", json={"mood": 4}, headers=auth_headers).status_code == 404


def test_delete_entry(client, auth_headers, hike):
    entry = client.post(entries_url(hike), json=entry_payload(), headers=auth_headers).json()
    url = f"{entries_url(hike)}/{entry['id']}"
    
    assert client.delete(url, headers=auth_headers).status_code == 200
    assert client.delete(url, headers=auth_headers).status_code == 404
    assert client.get(entries_url(hike), headers=auth_headers).json() == []


def test_stats_reflect_entry_changes(client, auth_headers, hike):
    entry = client.post(entries_url(hike), json=entry_payload(), headers=auth_headers).json()
    client.put(
        f"{entries_url(hike)}/{entry['id']}",
        json={"expenses": [{"category": "Food", "amount": 300}]},
        headers=auth_headers
    )
    
    stats = client.get(f"/api/hikes/{hike['id']}/stats", headers=auth_headers).json()["stats"]
    assert stats["totalMoneySpent"] == 300
    assert stats["onTrailBudgetRemaining"] == 0
    assert stats["onTrailBudgetPercentage"] == "150.0"
    assert stats["preHikeSpent"] == 0
