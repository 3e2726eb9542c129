from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi
import os
from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "fastfood")
    JWT_SECRET: str = os.getenv("JWT_SECRET", "change-me")
    JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60))

    # orders
    ORDER_TIMEZONE: str = os.getenv("ORDER_TIMEZONE", "Europe/Rome")
    DEFAULT_PREPARATION_TIME: int = int(os.getenv("DEFAULT_PREPARATION_TIME", 10))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()


client = MongoClient(settings.MONGO_URI, server_api=ServerApi('1'))

db = client[settings.MONGO_DB_NAME]

def get_db():

    yield db
