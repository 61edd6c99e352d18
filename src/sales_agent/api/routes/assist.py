"""AI assist endpoints: Magic Suggest, Score Lead, Summary."""

from fastapi import APIRouter, Depends, HTTPException, Request

from sales_agent.assist.coordinator import AssistKind
from sales_agent.errors import CustomerNotFoundError

from ..auth import current_user

router = APIRouter(
    prefix="/conversations/{customer_id}/assist",
    dependencies=[Depends(current_user)],
)

CANCELLED_DETAIL = "Request cancelled: another conversation was selected"


@router.get("")
async def assist_status(customer_id: str, request: Request):
    """Busy flags per assist kind, used to disable the triggering controls."""
    console = request.app.state.console
    try:
        request.app.state.store.get_customer(customer_id)
    except CustomerNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return {kind.value: console.is_busy(customer_id, kind) for kind in AssistKind}


@router.post("/reply")
async def suggest_reply(customer_id: str, request: Request):
    try:
        reply = await request.app.state.console.suggest_reply(customer_id)
    except CustomerNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    if reply is None:
        raise HTTPException(status_code=409, detail=CANCELLED_DETAIL)
    return {"reply": reply}


@router.post("/classify")
async def score_lead(customer_id: str, request: Request):
    """Classify the lead and write the status back to the customer."""
    try:
        result = await request.app.state.console.score_lead(customer_id)
    except CustomerNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    if result is None:
        raise HTTPException(status_code=409, detail=CANCELLED_DETAIL)
    return result.to_dict()


@router.post("/summary")
async def summarize(customer_id: str, request: Request):
    try:
        summary = await request.app.state.console.summarize(customer_id)
    except CustomerNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    if summary is None:
        raise HTTPException(status_code=409, detail=CANCELLED_DETAIL)
    return {"summary": summary}
