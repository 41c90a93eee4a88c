import logging

from notifications.models import Notification
from notifications.services import send_notification

logger = logging.getLogger(__name__)


def _base_payload(contract, extra=None):
    payload = {
        "contract_id": str(getattr(contract, "id", "")),
        "offer_id": str(getattr(contract, "offer_id", "")) if getattr(contract, "offer_id", None) else None,
        "signature_state": getattr(contract, "signature_state", None),
    }
    if extra:
        payload.update(extra)
    return payload


def notify_employee_signed(contract, offer):
    """Tell the HR employee handling the offer that the new hire has signed."""
    return send_notification(
        to=offer.hr_employee_id,
        type="Contract Signed by Employee",
        message=f"Employee has signed the contract for offer {offer.id}",
        level=Notification.TYPE_ACTION,
        data=_base_payload(contract, {"event": "contracts.employee_signed"}),
    )


def notify_fully_executed(contract, offer):
    """Welcome the candidate once the employer countersigns."""
    return send_notification(
        to=offer.candidate_id,
        type="Contract Fully Executed",
        message="Your employment contract has been fully signed. Welcome aboard!",
        data=_base_payload(contract, {"event": "contracts.fully_executed"}),
    )


def notify_signature_events(before, after, offer):
    """Send the notifications matching whichever signature timestamp newly appeared."""
    sent = []
    if before.employee_signed_at is None and after.employee_signed_at is not None:
        sent.append(notify_employee_signed(after, offer))
    if before.employer_signed_at is None and after.employer_signed_at is not None:
        sent.append(notify_fully_executed(after, offer))
    if sent:
        logger.info("Sent %s signature notification(s) for contract %s", len(sent), after.id)
    return sent
