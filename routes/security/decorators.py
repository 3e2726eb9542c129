from fastapi import HTTPException, Depends
from routes.security.protected_authorise import get_current_user
from schema.user import UserOutput

def authorize(roles: list, detail: str = "User is not authorized to access this resource"):
    """Dependency that resolves the caller and rejects roles outside ``roles``."""
    def checker(current_user: UserOutput = Depends(get_current_user)) -> UserOutput:
        if current_user.role not in roles:
            raise HTTPException(status_code=403, detail=detail)
        return current_user
    return checker
