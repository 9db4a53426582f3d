# app/users/user_models/schemas.py

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ✅ Request schema for registration
class UserRegister(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=8, max_length=100)

    @field_validator("username", mode="before")
    def normalize_username(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


# ✅ Repository input (already hashed)
class UserCreate(BaseModel):
    username: str
    hashed_password: str


# ✅ Stored user record (hash only, never the plain password)
class UserRecord(BaseModel):
    id: int
    username: str
    hashed_password: str
    model_config = ConfigDict(from_attributes=True)


# ✅ Response schema for user info
class UserResponse(BaseModel):
    id: int
    username: str
    model_config = ConfigDict(from_attributes=True)
