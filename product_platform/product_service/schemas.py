from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


# Login
class UserLogin(BaseModel):
    # Missing fields fall through to the credential check
    username: Optional[str] = None
    password: Optional[str] = None


class Token(BaseModel):
    token: str


class TokenClaims(BaseModel):
    user_id: int
    issued_at: datetime
    expires_at: datetime


# Products
class ProductCreate(BaseModel):
    name: Optional[str] = None
    price: Optional[float] = None


class ProductResponse(BaseModel):
    id: int
    name: str
    price: float

    model_config = ConfigDict(from_attributes=True)


class ErrorResponse(BaseModel):
    detail: str
