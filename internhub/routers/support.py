"""
Support router: student help tickets and their message threads.

Endpoints:
- GET    /api/support/tickets                  - all tickets (?student_id for one student's)
- GET    /api/support/tickets/{id}
- POST   /api/support/tickets                  - open a ticket
- POST   /api/support/tickets/{id}/messages    - reply on a ticket
- PUT    /api/support/tickets/{id}/status      - open / in-progress / resolved / closed
- DELETE /api/support/tickets/{id}
"""

from typing import Optional

from fastapi import APIRouter, Depends

from internhub.repositories.tickets import SupportTicketRepository
from internhub.schemas import MessageCreate, SupportTicket, TicketCreate, TicketStatusUpdate
from internhub.store import CollectionStore, get_store

router = APIRouter()


@router.get("/support/tickets", response_model=list[SupportTicket])
def list_tickets(student_id: Optional[str] = None, store: CollectionStore = Depends(get_store)):
    repo = SupportTicketRepository(store)
    return repo.for_student(student_id) if student_id else repo.list()


@router.get("/support/tickets/{ticket_id}", response_model=SupportTicket)
def get_ticket(ticket_id: str, store: CollectionStore = Depends(get_store)):
    return SupportTicketRepository(store).get(ticket_id)


@router.post("/support/tickets", response_model=SupportTicket, status_code=201)
def create_ticket(data: TicketCreate, store: CollectionStore = Depends(get_store)):
    return SupportTicketRepository(store).create(data)


@router.post("/support/tickets/{ticket_id}/messages", response_model=SupportTicket)
def add_message(ticket_id: str, data: MessageCreate, store: CollectionStore = Depends(get_store)):
    return SupportTicketRepository(store).add_message(ticket_id, data)


@router.put("/support/tickets/{ticket_id}/status", response_model=SupportTicket)
def set_status(ticket_id: str, data: TicketStatusUpdate, store: CollectionStore = Depends(get_store)):
    return SupportTicketRepository(store).set_status(ticket_id, data.status)


@router.delete("/support/tickets/{ticket_id}", status_code=204)
def delete_ticket(ticket_id: str, store: CollectionStore = Depends(get_store)):
    SupportTicketRepository(store).remove(ticket_id)
