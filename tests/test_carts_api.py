from bson import ObjectId


def entry(meal_id, restaurant_id, quantity=1, unit_price=5.0, name="Pizza"):
    return {"meal_id": str(meal_id), "restaurant_id": str(restaurant_id), "quantity": quantity, "unit_price": unit_price, "name": name}


def test_get_missing_cart(client, make_user):
    _, headers = make_user("mario")
    assert client.get("/carts/me", headers=headers).status_code == 404


def test_add_increments_same_meal_and_restaurant(client, db, make_user):
    user_id, headers = make_user("mario")
    meal_id, restaurant_id, other_restaurant_id = ObjectId(), ObjectId(), ObjectId()

    client.put("/carts/add", json=entry(meal_id, restaurant_id, quantity=2), headers=headers)
    client.put("/carts/add", json=entry(meal_id, restaurant_id, quantity=3), headers=headers)
    response = client.put("/carts/add", json=entry(meal_id, other_restaurant_id), headers=headers)

    assert response.status_code == 200
    meals = response.json()["meals"]
    assert [meal["quantity"] for meal in meals] == [5, 1]
    assert db.carts.count_documents({"user_id": user_id}) == 1


def test_add_rejects_bad_ids(client, make_user):
    _, headers = make_user("mario")
    assert client.put("/carts/add", json=entry("nope", ObjectId()), headers=headers).status_code == 400
    assert client.put("/carts/add", json=entry(ObjectId(), "nope"), headers=headers).status_code == 400


def test_removing_last_item_deletes_cart(client, db, make_user):
    user_id, headers = make_user("mario")
    pizza, beer, restaurant_id = ObjectId(), ObjectId(), ObjectId()
    client.put("/carts/add", json=entry(pizza, restaurant_id), headers=headers)
    client.put("/carts/add", json=entry(beer, restaurant_id, name="Beer"), headers=headers)

    response = client.put("/carts/remove", json={"meal_id": str(pizza)}, headers=headers)
    assert [meal["name"] for meal in response.json()["meals"]] == ["Beer"]

    client.put("/carts/remove", json={"meal_id": str(beer)}, headers=headers)

    assert db.carts.find_one({"user_id": user_id}) is None
    assert client.get("/carts/me", headers=headers).status_code == 404
    assert client.put("/carts/remove", json={"meal_id": str(beer)}, headers=headers).status_code == 404


def test_delete_cart(client, db, make_user):
    _, headers = make_user("mario")
    client.put("/carts/add", json=entry(ObjectId(), ObjectId()), headers=headers)

    assert client.delete("/carts/me", headers=headers).status_code == 200
    assert db.carts.count_documents({}) == 0
