"""Bearer token authentication for the SalesAgent API."""

from fastapi import Header, HTTPException, Request

from sales_agent.errors import SessionExpiredError
from sales_agent.models.user import User


async def current_user(request: Request, authorization: str = Header(...)) -> User:
    """Resolve the operator from the `Authorization: Bearer <token>` header."""
    scheme, _, token = authorization.partition(" ")
    if scheme != "Bearer" or not token:
        raise HTTPException(status_code=401, detail="Invalid or missing bearer token")
    try:
        return await request.app.state.auth.verify_token(token)
    except SessionExpiredError as e:
        raise HTTPException(status_code=401, detail=e.message)
