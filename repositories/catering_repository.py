"""
Catering Repository - Data access layer for event catering requests
"""

from datetime import date
from typing import Any, Dict, List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import CateringRequest, User
from domain.enums import CateringStatus


class CateringRepository(BaseRepository[CateringRequest]):
    """Repository for catering request data access"""

    def __init__(self, db: Session):
        super().__init__(db, CateringRequest)

    def create_request(
        self,
        user_id: int,
        event_type: str,
        event_date: date,
        pax: int,
        requirements: Optional[str] = None,
    ) -> CateringRequest:
        """Create a new pending catering request"""
        request = CateringRequest(
            user_id=user_id,
            event_type=event_type,
            event_date=event_date,
            pax=pax,
            requirements=requirements,
            status=CateringStatus.PENDING,
        )
        return self.create(request)

    def get_by_user_id(self, user_id: int) -> List[CateringRequest]:
        """Get all catering requests submitted by a user"""
        return (
            self.db.query(CateringRequest)
            .filter(CateringRequest.user_id == user_id)
            .order_by(CateringRequest.id)
            .all()
        )

    def list_with_requester(self) -> List[Dict[str, Any]]:
        """All requests joined with the requester's name and phone"""
        rows = (
            self.db.query(
                CateringRequest,
                User.name.label("user_name"),
                User.phone.label("user_phone"),
            )
            .join(User, CateringRequest.user_id == User.id)
            .order_by(CateringRequest.id)
            .all()
        )
        return [
            {
                "id": req.id,
                "user_id": req.user_id,
                "event_type": req.event_type,
                "event_date": req.event_date,
                "pax": req.pax,
                "requirements": req.requirements,
                "status": req.status,
                "quote_amount": req.quote_amount,
                "user_name": user_name,
                "user_phone": user_phone,
            }
            for req, user_name, user_phone in rows
        ]

    def update_status(
        self, request_id: int, status: CateringStatus, quote_amount: Optional[int]
    ) -> int:
        """Set status and quote; returns the number of rows updated"""
        count = (
            self.db.query(CateringRequest)
            .filter(CateringRequest.id == request_id)
            .update(
                {
                    CateringRequest.status: status,
                    CateringRequest.quote_amount: quote_amount,
                },
                synchronize_session=False,
            )
        )
        self.db.commit()
        return count

    def count_by_status(self, status: CateringStatus) -> int:
        return (
            self.db.query(func.count(CateringRequest.id))
            .filter(CateringRequest.status == status)
            .scalar()
            or 0
        )
