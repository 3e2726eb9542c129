import mongomock
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from main import app
from configurations.config import get_db
from routes.security.authHandler import AuthHandler
from routes.security.hashHelper import HashHelper


@pytest.fixture
def db():
    return mongomock.MongoClient()["fastfood_test"]


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def auth_headers(user_id, role):
    return {"Authorization": f"Bearer {AuthHandler.sign_jwt(str(user_id), role)}"}


@pytest.fixture
def make_user(db):
    def _make_user(username, role="customer", password="secret"):
        profile = {"address": "Via Roma 1", "payment_method": "card"} if role == "customer" else {"tax_id": "IT123"}
        user_id = db.users.insert_one({
            "username": username,
            "email": f"{username}@fastfood.it",
            "password": HashHelper.hash_password(password),
            "phone_number": "3331234567",
            "role": role,
            "profile": profile
        }).inserted_id
        return user_id, auth_headers(user_id, role)
    return _make_user


@pytest.fixture
def make_restaurant(db):
    def _make_restaurant(owner_id, name="Trattoria", address="Via Milano 2"):
        return db.restaurants.insert_one({
            "name": name,
            "address": address,
            "description": None,
            "image": None,
            "menu": [],
            "owner_id": owner_id
        }).inserted_id
    return _make_restaurant


@pytest.fixture
def make_order(db):
    def _make_order(restaurant_id, customer_id, status="ordered", delivery_method="home delivery",
                    wait_time=10, total=10, meals=None, order_date="01/06/2024 - 12:30"):
        return db.orders.insert_one({
            "customer_id": customer_id,
            "customer_name": "someone",
            "restaurant_id": restaurant_id,
            "meals": meals or [{"meal_id": ObjectId(), "name": "Pizza", "quantity": 1, "unit_price": total, "preparation_time": wait_time}],
            "total": total,
            "status": status,
            "order_date": order_date,
            "delivery_method": delivery_method,
            "wait_time": wait_time
        }).inserted_id
    return _make_order
