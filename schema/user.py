from pydantic import BaseModel, Field, EmailStr
from typing import Union, Literal, Annotated

CUSTOMER = "customer"
RESTAURANT_OWNER = "restaurant_owner"


class CustomerProfile(BaseModel):
    role: Literal["customer"]
    address: str = Field(min_length=1)
    payment_method: str = Field(min_length=1)

class OwnerProfile(BaseModel):
    role: Literal["restaurant_owner"]
    tax_id: str = Field(min_length=1)

UserProfile = Annotated[Union[CustomerProfile, OwnerProfile], Field(discriminator="role")]

# fields each role may carry in its profile
PROFILE_FIELDS = {
    CUSTOMER: ["address", "payment_method"],
    RESTAURANT_OWNER: ["tax_id"],
}


class UserInCreate(BaseModel):
    username: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)
    phone_number: str = Field(min_length=1)
    profile: UserProfile

class UserOutput(BaseModel):
    id: str
    role: str

class UserInUpdate(BaseModel):
    username: Union[str, None] = Field(default=None, min_length=1)
    email: Union[EmailStr, None] = None
    phone_number: Union[str, None] = Field(default=None, min_length=1)
    address: Union[str, None] = Field(default=None, min_length=1)
    payment_method: Union[str, None] = Field(default=None, min_length=1)
    tax_id: Union[str, None] = Field(default=None, min_length=1)

class PasswordUpdate(BaseModel):
    old_password: str
    new_password: str = Field(min_length=1)

class UserInLogin(BaseModel):
    username: str
    password: str

class UserWithToken(BaseModel):
    access_token: str
    token_type: str
    role: str
