from jose import JWTError, jwt
import time
import logging

from configurations.config import settings

JWT_SECRET = settings.JWT_SECRET
JWT_ALGORITHM = settings.JWT_ALGORITHM
ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES

logger = logging.getLogger(__name__)

class AuthHandler():
    @staticmethod
    def sign_jwt(user_id: str, role: str) -> str:
        payload = {
            "user_id": user_id,
            "role": role,
            "exp": int(time.time() + ACCESS_TOKEN_EXPIRE_MINUTES * 60)
        }

        token = jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)
        return token


    @staticmethod
    def decode_jwt(token: str) -> dict:
       try:
           # jose rejects expired tokens on its own
           return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
       except JWTError as e:
           logger.info(f"Unable to decode token: {e}")
           return None
