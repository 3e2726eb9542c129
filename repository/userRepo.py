from pymongo.database import Database
from repository.base import BaseRepository, to_object_id

class UserRepository(BaseRepository):
    collection = "users"

    def __init__(self, db: Database):
        super().__init__(db)

    def create_user(self, user_data: dict):
        return self.insert(user_data)

    def user_exist(self, username: str = None, email: str = None, exclude_id=None) -> bool:
        conditions = []
        if username is not None:
            conditions.append({"username": username})
        if email is not None:
            conditions.append({"email": email})
        if not conditions:
            return False
        query = {"$or": conditions}
        if exclude_id is not None:
            query["_id"] = {"$ne": to_object_id(exclude_id)}
        return self.find_one(query) is not None

    def get_user_by_username(self, username: str):
        return self.find_one({"username": username})

    def get_user_by_id(self, user_id, with_password: bool = False):
        projection = None if with_password else {"password": 0}
        return self.find_by_id(user_id, projection)

    def update_user(self, user_id, fields: dict):
        return self.find_and_update(
            {"_id": to_object_id(user_id)},
            {"$set": fields},
            projection={"password": 0}
        )

    def delete_user(self, user_id):
        return self.delete({"_id": to_object_id(user_id)})
