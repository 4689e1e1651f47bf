"""Manufacturer Routes — read-only access under /cars/manufacturers.

Invariants:
    - The list returns every seeded manufacturer, each with self + collection links
    - Single lookup by code returns 200 or 404
"""


async def test_list_manufacturers(client, seed_manufacturers, default_manufacturers):
    res = await client.get("/cars/manufacturers")

    assert res.status_code == 200
    items = res.json()["items"]
    assert len(items) == len(default_manufacturers)
    assert {i["entity"]["code"]: i["entity"]["name"] for i in items} == default_manufacturers


async def test_manufacturer_links(client, seed_manufacturers):
    res = await client.get("/cars/manufacturers")

    first = res.json()["items"][0]
    links = {link["rel"]: link["href"] for link in first["links"]}
    assert links["self"] == f"http://test/cars/manufacturers/{first['entity']['code']}"
    assert links["manufacturers"] == "http://test/cars/manufacturers"


async def test_list_manufacturers_empty(client):
    res = await client.get("/cars/manufacturers")

    assert res.status_code == 200
    assert res.json()["items"] == []


async def test_get_manufacturer(client, seed_manufacturers):
    res = await client.get("/cars/manufacturers/103")

    assert res.status_code == 200
    assert res.json()["entity"] == {"code": 103, "name": "BMW"}


async def test_get_unknown_manufacturer_returns_404(client, seed_manufacturers):
    res = await client.get("/cars/manufacturers/1")

    assert res.status_code == 404
    assert res.json()["error"]["code"] == "MANUFACTURER_NOT_FOUND"


async def test_get_manufacturer_code_beyond_integer_column_returns_404(client, seed_manufacturers):
    res = await client.get("/cars/manufacturers/99999999999999999999")

    assert res.status_code == 404
    assert res.json()["error"]["code"] == "MANUFACTURER_NOT_FOUND"
