from bson import ObjectId
import pytest


def meal_body(**overrides):
    body = {
        "name": "Carbonara",
        "category": "Pasta",
        "area": "Italian",
        "instructions": "Cook the pasta",
        "ingredients": ["spaghetti", "guanciale"],
        "measures": ["100g", "50g"],
        "price": 12.5,
        "preparation_time": 15,
    }
    body.update(overrides)
    return body


@pytest.fixture
def owner(make_user, make_restaurant):
    owner_id, headers = make_user("luigi", role="restaurant_owner")
    return headers, make_restaurant(owner_id)


def test_create_meal_adds_to_menu(client, db, owner):
    headers, restaurant_id = owner

    response = client.post("/meals", json=meal_body(), headers=headers)

    assert response.status_code == 201
    meal_id = ObjectId(response.json()["id"])
    assert response.json()["restaurant_id"] == str(restaurant_id)
    assert db.restaurants.find_one({"_id": restaurant_id})["menu"] == [meal_id]


def test_create_meal_validation(client, owner, make_user):
    headers, _ = owner
    assert client.post("/meals", json=meal_body(measures=["100g"]), headers=headers).status_code == 400
    assert client.post("/meals", json=meal_body(ingredients=[], measures=[]), headers=headers).status_code == 400
    assert client.post("/meals", json=meal_body(price=-1), headers=headers).status_code == 400
    assert client.post("/meals", json=meal_body(preparation_time=-5), headers=headers).status_code == 400

    _, no_restaurant = make_user("wario", role="restaurant_owner")
    assert client.post("/meals", json=meal_body(), headers=no_restaurant).status_code == 403

    _, customer = make_user("mario")
    assert client.post("/meals", json=meal_body(), headers=customer).status_code == 403


def test_list_meals_filters(client, db, owner):
    _, restaurant_id = owner
    db.meals.insert_many([
        {"name": "Carbonara", "category": "Pasta", "area": "Italian", "price": 12, "restaurant_id": restaurant_id},
        {"name": "Pad Thai", "category": "Noodles", "area": "Thai", "price": 9},
        {"name": "Amatriciana", "category": "Pasta", "area": "Italian", "price": 8},
    ])

    assert len(client.get("/meals").json()) == 3
    assert len(client.get("/meals", params={"category": "Pasta"}).json()) == 2
    assert [m["name"] for m in client.get("/meals", params={"name": "carbo"}).json()] == ["Carbonara"]
    assert [m["name"] for m in client.get("/meals", params={"min_price": 8.5, "max_price": 10}).json()] == ["Pad Thai"]
    assert len(client.get("/meals", params={"restaurant_id": str(restaurant_id)}).json()) == 1
    assert client.get("/meals", params={"restaurant_id": "nope"}).status_code == 400


def test_get_meal(client, db):
    meal_id = db.meals.insert_one({"name": "Pad Thai"}).inserted_id
    assert client.get(f"/meals/{meal_id}").json()["name"] == "Pad Thai"
    assert client.get("/meals/nope").status_code == 400
    assert client.get(f"/meals/{ObjectId()}").status_code == 404


def test_update_meal(client, db, owner):
    headers, restaurant_id = owner
    meal_id = client.post("/meals", json=meal_body(), headers=headers).json()["id"]

    response = client.put(f"/meals/{meal_id}", json={"price": 14}, headers=headers)
    assert response.status_code == 200
    assert response.json()["price"] == 14

    assert client.put(f"/meals/{meal_id}", json={}, headers=headers).status_code == 400
    assert client.put(f"/meals/{meal_id}", json={"measures": ["1"]}, headers=headers).status_code == 400


def test_general_and_foreign_meals_are_read_only(client, db, owner, make_user, make_restaurant):
    headers, _ = owner
    general_id = db.meals.insert_one({"name": "Pad Thai"}).inserted_id
    other_owner_id, _ = make_user("peach", role="restaurant_owner")
    foreign_id = db.meals.insert_one({"name": "Nigiri", "restaurant_id": make_restaurant(other_owner_id)}).inserted_id

    assert client.put(f"/meals/{general_id}", json={"price": 1}, headers=headers).status_code == 403
    assert client.delete(f"/meals/{general_id}", headers=headers).status_code == 403
    assert client.put(f"/meals/{foreign_id}", json={"price": 1}, headers=headers).status_code == 403
    assert client.delete(f"/meals/{foreign_id}", headers=headers).status_code == 403


def test_delete_meal_removes_from_menu(client, db, owner):
    headers, restaurant_id = owner
    meal_id = client.post("/meals", json=meal_body(), headers=headers).json()["id"]

    response = client.delete(f"/meals/{meal_id}", headers=headers)

    assert response.status_code == 204
    assert db.meals.count_documents({}) == 0
    assert db.restaurants.find_one({"_id": restaurant_id})["menu"] == []
    assert client.delete(f"/meals/{meal_id}", headers=headers).status_code == 404


def test_update_meal_rejects_blank_required_fields(client, db, owner):
    headers, _ = owner
    meal_id = client.post("/meals", json=meal_body(), headers=headers).json()["id"]

    assert client.put(f"/meals/{meal_id}", json={"ingredients": [], "measures": []}, headers=headers).status_code == 400
    assert client.put(f"/meals/{meal_id}", json={"name": ""}, headers=headers).status_code == 400

    stored = db.meals.find_one({"_id": ObjectId(meal_id)})
    assert stored["name"] == "Carbonara"
    assert stored["ingredients"] == ["spaghetti", "guanciale"]
