"""Health check endpoint."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    """Report liveness and the size of the in-memory inbox."""
    return {"status": "ok", "customers": len(request.app.state.store.customers)}
