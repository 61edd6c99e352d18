"""Inbox endpoints: conversation list, threads, messages, customer edits."""

from typing import Any

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field

from sales_agent.errors import CustomerNotFoundError, ValidationError
from sales_agent.models.customer import Customer, LeadStatus
from sales_agent.models.knowledge_base import KnowledgeBaseItem
from sales_agent.models.message import Message

from ..auth import current_user

logger = structlog.get_logger(__name__)

router = APIRouter(dependencies=[Depends(current_user)])


class SendMessageRequest(BaseModel):
    content: str = Field(..., min_length=1)


class SelectionRequest(BaseModel):
    customer_id: str | None = None


class CustomerUpdate(BaseModel):
    """Editable customer fields. Omitted fields are left untouched."""

    name: str | None = None
    phone_number: str | None = None
    tags: list[str] | None = None
    lead_status: LeadStatus | None = None
    notes: str | None = None


def _not_found(e: CustomerNotFoundError) -> HTTPException:
    return HTTPException(status_code=404, detail=e.message)


@router.get("/conversations")
async def list_conversations(request: Request) -> list[dict[str, Any]]:
    """Inbox rows, most recently active first."""
    rows = request.app.state.store.conversation_list()
    return [
        {
            "customer": row.customer.model_dump(mode="json"),
            "last_message": row.last_message.model_dump(mode="json") if row.last_message else None,
        }
        for row in rows
    ]


@router.get("/conversations/{customer_id}/messages", response_model=list[Message])
async def get_thread(customer_id: str, request: Request):
    """Messages of one conversation, oldest first."""
    try:
        return request.app.state.store.thread(customer_id)
    except CustomerNotFoundError as e:
        raise _not_found(e)


@router.post("/conversations/{customer_id}/messages", response_model=Message, status_code=201)
async def send_message(customer_id: str, body: SendMessageRequest, request: Request):
    """Send an outgoing message to the customer."""
    try:
        return request.app.state.store.send_message(customer_id, body.content)
    except CustomerNotFoundError as e:
        raise _not_found(e)


@router.post("/conversations/{customer_id}/incoming", response_model=Message, status_code=201)
async def receive_message(customer_id: str, body: SendMessageRequest, request: Request):
    """Record a message from the customer (simulated WhatsApp inbound)."""
    try:
        return request.app.state.store.receive_message(customer_id, body.content)
    except CustomerNotFoundError as e:
        raise _not_found(e)


@router.put("/selection")
async def select_conversation(body: SelectionRequest, request: Request):
    """Open a conversation; assist requests of the previous one are cancelled."""
    try:
        customer = request.app.state.console.select_customer(body.customer_id)
    except CustomerNotFoundError as e:
        raise _not_found(e)
    return {"customer": customer.model_dump(mode="json") if customer else None}


@router.patch("/customers/{customer_id}", response_model=Customer)
async def update_customer(customer_id: str, body: CustomerUpdate, request: Request):
    """Partially update a customer (notes, tags, manual lead status override)."""
    updates = body.model_dump(exclude_unset=True)
    try:
        return request.app.state.store.update_customer(customer_id, **updates)
    except CustomerNotFoundError as e:
        raise _not_found(e)
    except ValidationError as e:
        logger.warning("inbox.update_rejected", customer_id=customer_id, error=str(e))
        raise HTTPException(status_code=422, detail=e.message)


@router.get("/knowledge-base", response_model=list[KnowledgeBaseItem])
async def knowledge_base(request: Request):
    return list(request.app.state.store.knowledge_base)
