from fastapi import APIRouter, Depends, HTTPException
from pymongo.database import Database
import logging

from configurations.config import get_db
from routes.security.protected_authorise import get_current_user
from routes.service.userService import UserService
from schema.user import UserInCreate, UserInLogin, UserInUpdate, PasswordUpdate, UserOutput, UserWithToken

userRouter = APIRouter()
logger = logging.getLogger(__name__)


@userRouter.post("/register", status_code=201)
async def register(signUpDetails: UserInCreate, db: Database = Depends(get_db)):
    try:
        return UserService(db).signup(signUpDetails)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Signup error: {error}")
        raise HTTPException(status_code=500, detail="Registration failed")


@userRouter.post("/login", status_code=200, response_model=UserWithToken)
async def login(loginDetails: UserInLogin, db: Database = Depends(get_db)):
    try:
        return UserService(db).login(loginDetails)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Login error: {error}")
        raise HTTPException(status_code=500, detail="Login failed")


@userRouter.get("/me")
async def get_me(current_user: UserOutput = Depends(get_current_user), db: Database = Depends(get_db)):
    try:
        return UserService(db).get_me(current_user)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error retrieving user: {error}")
        raise HTTPException(status_code=500, detail="Error retrieving user")


@userRouter.put("/me")
async def update_me(
    update: UserInUpdate,
    current_user: UserOutput = Depends(get_current_user),
    db: Database = Depends(get_db)
):
    """
    Update the caller's profile. The password has its own endpoint.
    """
    try:
        return UserService(db).update_me(current_user, update)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error updating user: {error}")
        raise HTTPException(status_code=500, detail="Error updating user")


@userRouter.put("/me/password")
async def change_password(
    passwords: PasswordUpdate,
    current_user: UserOutput = Depends(get_current_user),
    db: Database = Depends(get_db)
):
    try:
        return UserService(db).change_password(current_user, passwords)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error updating password: {error}")
        raise HTTPException(status_code=500, detail="Error updating password")


@userRouter.delete("/{user_id}")
async def delete_user(
    user_id: str,
    current_user: UserOutput = Depends(get_current_user),
    db: Database = Depends(get_db)
):
    """
    Delete the caller's account.

    Customers lose their cart and open orders, owners their restaurant with its
    meals and open orders. Delivered orders are kept for statistics.
    """
    try:
        return UserService(db).delete_user(current_user, user_id)
    except HTTPException as e:
        raise e
    except Exception as error:
        logger.error(f"Error deleting user {user_id}: {error}")
        raise HTTPException(status_code=500, detail="Error deleting user")
