from typing import Any, Dict, List
from sqlalchemy.orm import Session
import logging

from domain.models import CateringRequest
from domain.schemas.catering_schemas import CateringRequestCreate, CateringStatusUpdate
from repositories import CateringRepository, UserRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("wagholi.catering")


class CateringService:
    @staticmethod
    def create_request(db: Session, data: CateringRequestCreate) -> CateringRequest:
        """
        Submit a catering inquiry on behalf of a user.

        Raises:
            NotFoundError: If the user does not exist
        """
        if not UserRepository(db).exists(data.user_id):
            logger.warning(f"catering_request failed: user {data.user_id} not found")
            raise NotFoundError(f"User {data.user_id} not found")

        request = CateringRepository(db).create_request(
            user_id=data.user_id,
            event_type=data.event_type,
            event_date=data.event_date,
            pax=data.pax,
            requirements=data.requirements,
        )
        logger.info(
            f"catering_requested request_id={request.id} user_id={data.user_id} "
            f"event_type={data.event_type} pax={data.pax}"
        )
        return request

    @staticmethod
    def list_for_user(db: Session, user_id: int) -> List[CateringRequest]:
        return CateringRepository(db).get_by_user_id(user_id)

    @staticmethod
    def list_all_with_requester(db: Session) -> List[Dict[str, Any]]:
        return CateringRepository(db).list_with_requester()

    @staticmethod
    def update_status(db: Session, update: CateringStatusUpdate) -> None:
        """Admin sets the workflow status and quote of a request"""
        updated = CateringRepository(db).update_status(
            update.id, update.status, update.quote_amount
        )
        if not updated:
            logger.warning(f"catering_status failed: request {update.id} not found")
            raise NotFoundError(f"Catering request {update.id} not found")
        logger.info(
            f"catering_status_updated request_id={update.id} "
            f"status={update.status.value} quote_amount={update.quote_amount}"
        )
