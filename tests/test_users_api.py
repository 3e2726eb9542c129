from routes.security.authHandler import AuthHandler


def customer_body(**overrides):
    body = {
        "username": "mario",
        "email": "mario@fastfood.it",
        "password": "secret",
        "phone_number": "3331234567",
        "profile": {"role": "customer", "address": "Via Roma 1", "payment_method": "card"},
    }
    body.update(overrides)
    return body


def owner_body(**overrides):
    body = {
        "username": "luigi",
        "email": "luigi@fastfood.it",
        "password": "secret",
        "phone_number": "3337654321",
        "profile": {"role": "restaurant_owner", "tax_id": "IT01234567890"},
    }
    body.update(overrides)
    return body


def test_register_stores_role_profile(client, db):
    response = client.post("/users/register", json=customer_body())
    assert response.status_code == 201

    user = db.users.find_one({"username": "mario"})
    assert user["role"] == "customer"
    assert user["profile"] == {"address": "Via Roma 1", "payment_method": "card"}
    assert user["password"] != "secret"

    client.post("/users/register", json=owner_body())
    assert db.users.find_one({"username": "luigi"})["profile"] == {"tax_id": "IT01234567890"}


def test_register_validation_and_conflicts(client):
    assert client.post("/users/register", json=customer_body(profile={"role": "customer", "address": "Via Roma 1"})).status_code == 400
    assert client.post("/users/register", json=owner_body(profile={"role": "restaurant_owner"})).status_code == 400
    assert client.post("/users/register", json=customer_body(profile={"role": "admin"})).status_code == 400

    assert client.post("/users/register", json=customer_body()).status_code == 201
    assert client.post("/users/register", json=customer_body(email="other@fastfood.it")).status_code == 409
    assert client.post("/users/register", json=customer_body(username="other")).status_code == 409


def test_login_and_me(client):
    client.post("/users/register", json=owner_body())

    response = client.post("/users/login", json={"username": "luigi", "password": "secret"})
    assert response.status_code == 200
    assert response.json()["role"] == "restaurant_owner"
    token = response.json()["access_token"]
    assert AuthHandler.decode_jwt(token)["role"] == "restaurant_owner"

    me = client.get("/users/me", headers={"Authorization": f"Bearer {token}"}).json()
    assert me["username"] == "luigi"
    assert "password" not in me

    assert client.post("/users/login", json={"username": "luigi", "password": "wrong"}).status_code == 401
    assert client.get("/users/me", headers={"Authorization": "Bearer garbage"}).status_code == 401


def test_update_me(client, make_user):
    _, headers = make_user("mario")
    make_user("toad")

    response = client.put("/users/me", json={"phone_number": "000", "address": "Via Napoli 9"}, headers=headers)
    assert response.status_code == 200
    assert response.json()["phone_number"] == "000"
    assert response.json()["profile"]["address"] == "Via Napoli 9"

    assert client.put("/users/me", json={"username": "toad"}, headers=headers).status_code == 409
    assert client.put("/users/me", json={"tax_id": "IT1"}, headers=headers).status_code == 400
    assert client.put("/users/me", json={}, headers=headers).status_code == 400


def test_change_password(client, make_user):
    _, headers = make_user("mario", password="old")

    assert client.put("/users/me/password", json={"old_password": "bad", "new_password": "new"}, headers=headers).status_code == 400
    assert client.put("/users/me/password", json={"old_password": "old", "new_password": "new"}, headers=headers).status_code == 200
    assert client.post("/users/login", json={"username": "mario", "password": "new"}).status_code == 200


def test_delete_customer_keeps_delivered_orders(client, db, make_user, make_restaurant, make_order):
    customer_id, customer = make_user("mario")
    owner_id, _ = make_user("luigi", role="restaurant_owner")
    restaurant_id = make_restaurant(owner_id)
    delivered_id = make_order(restaurant_id, customer_id, status="delivered")
    make_order(restaurant_id, customer_id, status="ordered")
    db.carts.insert_one({"user_id": customer_id, "meals": []})

    _, stranger = make_user("toad")
    assert client.delete(f"/users/{customer_id}", headers=stranger).status_code == 403
    assert client.delete("/users/nope", headers=customer).status_code == 400

    assert client.delete(f"/users/{customer_id}", headers=customer).status_code == 200
    assert db.users.find_one({"_id": customer_id}) is None
    assert db.carts.count_documents({}) == 0
    assert [order["_id"] for order in db.orders.find({})] == [delivered_id]


def test_delete_owner_purges_restaurant(client, db, make_user, make_restaurant, make_order):
    customer_id, _ = make_user("mario")
    owner_id, owner = make_user("luigi", role="restaurant_owner")
    restaurant_id = make_restaurant(owner_id)
    db.meals.insert_one({"name": "Carbonara", "restaurant_id": restaurant_id})
    make_order(restaurant_id, customer_id, status="in-delivery")
    delivered_id = make_order(restaurant_id, customer_id, status="delivered")

    assert client.delete(f"/users/{owner_id}", headers=owner).status_code == 200
    assert db.restaurants.count_documents({}) == 0
    assert db.meals.count_documents({}) == 0
    assert [order["_id"] for order in db.orders.find({})] == [delivered_id]


def test_update_me_rejects_blank_values(client, db, make_user):
    _, mario = make_user("mario")
    _, toad = make_user("toad")

    assert client.put("/users/me", json={"username": ""}, headers=mario).status_code == 400
    assert client.put("/users/me", json={"username": ""}, headers=toad).status_code == 400
    assert client.put("/users/me", json={"phone_number": ""}, headers=mario).status_code == 400
    assert client.put("/users/me", json={"email": ""}, headers=mario).status_code == 400
    assert client.put("/users/me", json={"address": ""}, headers=mario).status_code == 400
    assert db.users.count_documents({"username": ""}) == 0
    assert db.users.find_one({"username": "mario"})["phone_number"] == "3331234567"
