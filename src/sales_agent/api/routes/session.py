"""Login and session verification endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from sales_agent.errors import InvalidCredentialsError
from sales_agent.models.user import AuthResponse, User

from ..auth import current_user

router = APIRouter(prefix="/auth")


class LoginRequest(BaseModel):
    email: str
    password: str


@router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest, request: Request):
    """Exchange credentials for a user profile and bearer token."""
    try:
        return await request.app.state.auth.login(body.email, body.password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=401, detail=e.message)


@router.get("/me", response_model=User)
async def me(user: User = Depends(current_user)):
    """Return the operator the bearer token belongs to."""
    return user
