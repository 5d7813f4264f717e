"""
Support tickets: a student opens a ticket, then student and admins exchange
messages on it until someone resolves or closes it.
"""

from datetime import datetime

from internhub.repositories.base import CollectionRepository
from internhub.schemas import (
    MessageCreate, SupportMessage, SupportTicket, TicketCreate, TicketStatus,
)
from internhub.store import SUPPORT_TICKETS, new_id


class SupportTicketRepository(CollectionRepository[SupportTicket]):
    key = SUPPORT_TICKETS
    model = SupportTicket
    id_prefix = "t"
    entity_name = "SupportTicket"
    prepend = True

    def create(self, data: TicketCreate) -> SupportTicket:
        now = datetime.now().isoformat()
        ticket_id = self._new_id()
        ticket = SupportTicket(
            **data.model_dump(exclude={"messages"}),
            id=ticket_id,
            status=TicketStatus.OPEN,
            created_at=now,
            updated_at=now,
            messages=[_message(ticket_id, m, now) for m in data.messages],
        )
        return self._insert(ticket)

    def for_student(self, student_id: str) -> list[SupportTicket]:
        return [t for t in self._load() if t.student_id == student_id]

    def add_message(self, ticket_id: str, data: MessageCreate) -> SupportTicket:
        """Append a message and bump updatedAt. Raises NotFoundError for an unknown ticket."""
        ticket = self.get(ticket_id)
        now = datetime.now().isoformat()
        return self.update(ticket_id, {
            "messages": ticket.messages + [_message(ticket_id, data, now)],
            "updated_at": now,
        })

    def set_status(self, ticket_id: str, status: TicketStatus) -> SupportTicket:
        return self.update(ticket_id, {"status": status, "updated_at": datetime.now().isoformat()})


def _message(ticket_id: str, data: MessageCreate, created_at: str) -> SupportMessage:
    return SupportMessage(
        **data.model_dump(),
        id=new_id("msg"),
        ticket_id=ticket_id,
        created_at=created_at,
    )
