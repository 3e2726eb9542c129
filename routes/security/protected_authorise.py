from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from routes.security.authHandler import AuthHandler
from schema.user import UserOutput

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="users/login")

def get_current_user(token: str = Depends(oauth2_scheme)) -> UserOutput:
    auth_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid Authentication Credentials",
        headers={"WWW-Authenticate": "Bearer"}
    )
    payload = AuthHandler.decode_jwt(token=token)

    if payload and payload.get("user_id") and payload.get("role"):
        return UserOutput(id=str(payload["user_id"]), role=payload["role"])
    raise auth_exception
