from pydantic import BaseModel, Field
from datetime import datetime

# Shared properties for staff accounts
class UserBase(BaseModel):
    username: str = Field(min_length=3)
    full_name: str
    role: str = "cashier"
    is_active: bool = True

# Schema for registering a staff account
class UserCreate(UserBase):
    password: str = Field(min_length=6, max_length=72)  # bcrypt input limit

# Output schema; the password hash never leaves the server
class UserResponse(UserBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
