"""Car Routes — end-to-end behaviour of /cars against an in-memory database.

Invariants:
    - POST answers 201 with Location = /cars/{newId}; GET of that id returns the same car
    - GET / PUT / DELETE of unknown ids answer 404
    - PUT with path id != body id answers 400 and leaves the stored car unchanged
    - DELETE answers 200 with an empty body; the car stays gone afterwards
    - Schema violations and malformed JSON answer 400 before any write
"""

import pytest


def _car_payload(**overrides):
    payload = {"make": "Toyota", "model": "Corolla"}
    payload.update(overrides)
    return payload


# ─── Create ─────────────────────────────────────────────────────

async def test_create_returns_201_with_location(client):
    res = await client.post("/cars", json=_car_payload())

    assert res.status_code == 201
    car_id = res.json()["entity"]["id"]
    assert res.headers["location"] == f"http://test/cars/{car_id}"


async def test_created_car_can_be_fetched(client):
    created = await client.post("/cars", json=_car_payload())
    location = created.headers["location"]

    res = await client.get(location)

    assert res.status_code == 200
    entity = res.json()["entity"]
    assert entity["make"] == "Toyota"
    assert entity["model"] == "Corolla"
    assert entity == created.json()["entity"]


async def test_create_body_carries_self_and_collection_links(client):
    res = await client.post("/cars", json=_car_payload())

    car_id = res.json()["entity"]["id"]
    links = {link["rel"]: link["href"] for link in res.json()["links"]}
    assert links["self"] == f"http://test/cars/{car_id}"
    assert links["cars"] == "http://test/cars"
    assert "manufacturer" not in links


async def test_create_with_manufacturer_links_to_it(client, seed_manufacturers):
    res = await client.post(
        "/cars", json=_car_payload(make="Audi", model="A4", manufacturer_code=100),
    )

    assert res.status_code == 201
    links = {link["rel"]: link["href"] for link in res.json()["links"]}
    assert links["manufacturer"] == "http://test/cars/manufacturers/100"


async def test_create_ignores_client_supplied_id(client):
    first = await client.post("/cars", json=_car_payload())
    first_id = first.json()["entity"]["id"]

    res = await client.post("/cars", json=_car_payload(id=first_id, model="Camry"))

    assert res.status_code == 201
    assert res.json()["entity"]["id"] != first_id
    original = await client.get(f"/cars/{first_id}")
    assert original.json()["entity"]["model"] == "Corolla"


async def test_create_round_trips_location_and_details(client):
    payload = _car_payload(
        condition="NEW", body="sedan", number_of_doors=4, fuel_type="Gasoline",
        engine="1.8L I4", mileage=12, model_year=2020, production_year=2019,
        external_color="white",
        location={"lat": 40.73061, "lon": -73.935242, "city": "New York"},
    )

    created = await client.post("/cars", json=payload)
    res = await client.get(created.headers["location"])

    entity = res.json()["entity"]
    assert entity["condition"] == "NEW"
    assert entity["number_of_doors"] == 4
    assert entity["location"]["lat"] == pytest.approx(40.73061)
    assert entity["location"]["city"] == "New York"
    assert entity["created_at"]
    assert entity["modified_at"]


async def test_create_missing_make_returns_400(client):
    res = await client.post("/cars", json={"model": "Corolla"})

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any(d["field"] == "body.make" for d in error["details"])


async def test_create_blank_model_returns_400(client):
    res = await client.post("/cars", json=_car_payload(model="   "))
    assert res.status_code == 400


async def test_create_malformed_json_returns_400(client):
    res = await client.post(
        "/cars", content=b"{not json", headers={"content-type": "application/json"},
    )
    assert res.status_code == 400


async def test_create_invalid_condition_returns_400(client):
    res = await client.post("/cars", json=_car_payload(condition="BROKEN"))
    assert res.status_code == 400


async def test_create_unknown_manufacturer_returns_400(client, seed_manufacturers):
    res = await client.post("/cars", json=_car_payload(manufacturer_code=999))

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "UNKNOWN_MANUFACTURER"
    listing = await client.get("/cars")
    assert listing.json()["items"] == []


async def test_failed_validation_writes_nothing(client):
    await client.post("/cars", json=_car_payload(mileage=-5))

    res = await client.get("/cars")
    assert res.json()["items"] == []


# ─── Read ───────────────────────────────────────────────────────

async def test_get_car(client, seed_car):
    res = await client.get(f"/cars/{seed_car.id}")

    assert res.status_code == 200
    body = res.json()
    assert body["entity"]["make"] == "Chevrolet"
    assert body["entity"]["manufacturer_code"] == 101
    assert body["entity"]["location"]["lon"] == pytest.approx(-73.935242)


async def test_get_unknown_car_returns_404(client):
    res = await client.get("/cars/424242")

    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "CAR_NOT_FOUND"
    assert error["context"]["resource_id"] == "424242"


async def test_get_non_integer_id_returns_400(client):
    res = await client.get("/cars/abc")
    assert res.status_code == 400


async def test_list_cars_wraps_each_car(client):
    for model in ("Corolla", "Camry", "Prius"):
        await client.post("/cars", json=_car_payload(model=model))

    res = await client.get("/cars")

    assert res.status_code == 200
    body = res.json()
    assert [item["entity"]["model"] for item in body["items"]] == [
        "Corolla", "Camry", "Prius",
    ]
    for item in body["items"]:
        self_link = next(link for link in item["links"] if link["rel"] == "self")
        assert self_link["href"] == f"http://test/cars/{item['entity']['id']}"
    assert body["links"] == [{"rel": "self", "href": "http://test/cars"}]


async def test_list_cars_empty(client):
    res = await client.get("/cars")

    assert res.status_code == 200
    assert res.json()["items"] == []


# ─── Update ─────────────────────────────────────────────────────

async def test_update_returns_updated_car(client):
    created = await client.post("/cars", json=_car_payload())
    car_id = created.json()["entity"]["id"]

    res = await client.put(
        f"/cars/{car_id}",
        json=_car_payload(id=car_id, model="Corolla Hybrid", mileage=500),
    )

    assert res.status_code == 200
    entity = res.json()["entity"]
    assert entity["id"] == car_id
    assert entity["model"] == "Corolla Hybrid"
    assert entity["mileage"] == 500
    assert entity["created_at"] == created.json()["entity"]["created_at"]
    fetched = await client.get(f"/cars/{car_id}")
    assert fetched.json()["entity"]["model"] == "Corolla Hybrid"


async def test_update_id_mismatch_returns_400_and_does_not_write(client):
    created = await client.post("/cars", json=_car_payload())
    car_id = created.json()["entity"]["id"]

    res = await client.put(
        f"/cars/{car_id}",
        json=_car_payload(id=car_id + 1, model="Should Not Persist"),
    )

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "CAR_ID_MISMATCH"
    fetched = await client.get(f"/cars/{car_id}")
    assert fetched.json()["entity"] == created.json()["entity"]


async def test_update_id_mismatch_does_not_touch_other_car(client):
    first = await client.post("/cars", json=_car_payload(model="First"))
    second = await client.post("/cars", json=_car_payload(model="Second"))
    first_id = first.json()["entity"]["id"]
    second_id = second.json()["entity"]["id"]

    res = await client.put(
        f"/cars/{first_id}", json=_car_payload(id=second_id, model="Hijacked"),
    )

    assert res.status_code == 400
    fetched = await client.get(f"/cars/{second_id}")
    assert fetched.json()["entity"]["model"] == "Second"


async def test_update_without_body_id_returns_400(client):
    created = await client.post("/cars", json=_car_payload())
    car_id = created.json()["entity"]["id"]

    res = await client.put(f"/cars/{car_id}", json=_car_payload())

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_update_unknown_car_returns_404(client):
    res = await client.put("/cars/777", json=_car_payload(id=777))
    assert res.status_code == 404


# ─── Delete ─────────────────────────────────────────────────────

async def test_delete_returns_200_with_empty_body(client, seed_car):
    res = await client.delete(f"/cars/{seed_car.id}")

    assert res.status_code == 200
    assert res.content == b""


async def test_deleted_car_stays_gone(client, seed_car):
    await client.delete(f"/cars/{seed_car.id}")

    res = await client.get(f"/cars/{seed_car.id}")
    assert res.status_code == 404
    listing = await client.get("/cars")
    assert listing.json()["items"] == []


async def test_delete_unknown_car_returns_404(client):
    res = await client.delete("/cars/31337")
    assert res.status_code == 404


async def test_delete_twice_returns_404_second_time(client, seed_car):
    await client.delete(f"/cars/{seed_car.id}")

    res = await client.delete(f"/cars/{seed_car.id}")
    assert res.status_code == 404


# ─── Ids beyond the integer key column ──────────────────────────

OVERSIZE_ID = 99999999999999999999


async def test_get_oversize_id_returns_404(client):
    res = await client.get(f"/cars/{OVERSIZE_ID}")

    assert res.status_code == 404
    assert res.json()["error"]["code"] == "CAR_NOT_FOUND"


async def test_update_oversize_id_returns_404(client):
    res = await client.put(f"/cars/{OVERSIZE_ID}", json=_car_payload(id=OVERSIZE_ID))

    assert res.status_code == 404
    assert res.json()["error"]["code"] == "CAR_NOT_FOUND"


async def test_delete_oversize_id_returns_404(client):
    res = await client.delete(f"/cars/{OVERSIZE_ID}")

    assert res.status_code == 404
    assert res.json()["error"]["code"] == "CAR_NOT_FOUND"


async def test_create_with_oversize_manufacturer_code_returns_400(client, seed_manufacturers):
    res = await client.post("/cars", json=_car_payload(manufacturer_code=OVERSIZE_ID))

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "UNKNOWN_MANUFACTURER"


# ─── Stored rows and content type ───────────────────────────────

async def test_list_serves_stored_car_with_blank_make(client, test_db, make_car):
    test_db.add(make_car(make="", model=" "))
    await test_db.commit()

    res = await client.get("/cars")

    assert res.status_code == 200
    assert res.json()["items"][0]["entity"]["make"] == ""


@pytest.mark.parametrize("method,path,body", [
    ("GET", "/cars", None),
    ("POST", "/cars", {"make": "Toyota", "model": "Corolla"}),
    ("GET", "/cars/424242", None),
    ("POST", "/cars", {"model": "Corolla"}),
])
async def test_json_responses_declare_utf8(client, method, path, body):
    res = await client.request(method, path, json=body)

    assert res.headers["content-type"] == "application/json; charset=utf-8"
