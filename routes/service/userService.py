from repository.userRepo import UserRepository
from repository.cartRepo import CartRepository
from repository.orderRepo import OrderRepository
from repository.restaurantRepo import RestaurantRepository
from repository.base import parse_object_id
from schema.user import UserInCreate, UserInLogin, UserInUpdate, PasswordUpdate, UserOutput, CUSTOMER, RESTAURANT_OWNER, PROFILE_FIELDS
from routes.security.hashHelper import HashHelper
from routes.security.authHandler import AuthHandler
from routes.service.restaurantService import RestaurantService
from configurations.custom_json_encoder import serialize_doc
from fastapi import HTTPException
from pymongo.database import Database
import logging

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Database):
        self._userRepository = UserRepository(db)
        self._cartRepository = CartRepository(db)
        self._orderRepository = OrderRepository(db)
        self._restaurantRepository = RestaurantRepository(db)
        self._restaurantService = RestaurantService(db)


    def signup(self, user_details: UserInCreate) -> dict:
        if self._userRepository.user_exist(username=user_details.username, email=user_details.email):
            raise HTTPException(status_code=409, detail="Username or email already in use")

        profile = user_details.profile.model_dump(exclude={"role"})
        user_data = {
            "username": user_details.username,
            "email": user_details.email,
            "password": HashHelper.hash_password(user_details.password),
            "phone_number": user_details.phone_number,
            "role": user_details.profile.role,
            "profile": profile
        }
        user_id = self._userRepository.create_user(user_data)
        logger.info(f"Registered {user_data['role']} {user_details.username}")
        return {"message": "User registered successfully", "user_id": str(user_id)}


    def login(self, login_details: UserInLogin) -> dict:
        user = self._userRepository.get_user_by_username(login_details.username)
        if not user or not HashHelper.verify_password(login_details.password, user["password"]):
            raise HTTPException(status_code=401, detail="Invalid credentials")
        token = AuthHandler.sign_jwt(str(user["_id"]), user["role"])
        return {"access_token": token, "token_type": "bearer", "role": user["role"]}


    def get_me(self, current_user: UserOutput) -> dict:
        user = self._userRepository.get_user_by_id(current_user.id)
        if not user:
            raise HTTPException(status_code=404, detail="User not found")
        return serialize_doc(user)


    def update_me(self, current_user: UserOutput, update: UserInUpdate) -> dict:
        changes = update.model_dump(exclude_none=True)
        if not changes:
            raise HTTPException(status_code=400, detail="No valid field to update")

        if self._userRepository.user_exist(
            username=changes.get("username"),
            email=changes.get("email"),
            exclude_id=current_user.id
        ):
            raise HTTPException(status_code=409, detail="Username or email already in use")

        fields = {}
        allowed_profile_fields = PROFILE_FIELDS.get(current_user.role, [])
        for name, value in changes.items():
            if name in ("username", "email", "phone_number"):
                fields[name] = value
            elif name in allowed_profile_fields:
                fields[f"profile.{name}"] = value
            else:
                raise HTTPException(status_code=400, detail=f"Field '{name}' does not apply to role {current_user.role}")

        user = self._userRepository.update_user(current_user.id, fields)
        if not user:
            raise HTTPException(status_code=404, detail="User not found")
        return serialize_doc(user)


    def change_password(self, current_user: UserOutput, passwords: PasswordUpdate) -> dict:
        user = self._userRepository.get_user_by_id(current_user.id, with_password=True)
        if not user:
            raise HTTPException(status_code=404, detail="User not found")

        if not HashHelper.verify_password(passwords.old_password, user["password"]):
            raise HTTPException(status_code=400, detail="The old password does not match")

        self._userRepository.update_user(current_user.id, {"password": HashHelper.hash_password(passwords.new_password)})
        return {"message": "Password updated successfully"}


    def delete_user(self, current_user: UserOutput, user_id: str) -> dict:
        """
        Delete the caller's account and what hangs off it.

        Delivered orders stay in the database for restaurant statistics.
        """
        user_object_id = parse_object_id(user_id, "Invalid user id")
        if str(user_object_id) != current_user.id:
            raise HTTPException(status_code=403, detail="You cannot delete another user")

        if current_user.role == CUSTOMER:
            self._cartRepository.delete_cart(user_object_id)
            self._orderRepository.delete_undelivered_for_customer(user_object_id)

        if current_user.role == RESTAURANT_OWNER:
            restaurant = self._restaurantRepository.get_by_owner(user_object_id)
            if restaurant:
                self._restaurantService.purge_restaurant(restaurant["_id"])

        self._userRepository.delete_user(user_object_id)
        logger.info(f"Deleted {current_user.role} {user_id}")
        return {"message": "User and related data deleted"}
