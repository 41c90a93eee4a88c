import logging

from django.contrib.auth import get_user_model

from .models import Notification

logger = logging.getLogger(__name__)


def send_notification(*, to, type, message='', level=Notification.TYPE_INFO, data=None):
    """
    Emit an in-app notification.

    ``to`` is a user instance or a user id, ``type`` is the human readable
    notification kind stored as the title and ``message`` is the body.
    Errors from the store propagate to the caller.
    """
    if to is None:
        logger.warning("Notification '%s' dropped: no recipient.", type)
        return None

    if isinstance(to, get_user_model()):
        user_id = to.pk
    else:
        user_id = to

    notification = Notification.objects.create(
        user_id=user_id,
        title=type,
        body=message or '',
        type=level,
        status=Notification.STATUS_UNREAD,
        data=data or {},
    )
    logger.info("Notification '%s' sent to user %s", type, user_id)
    return notification
