import logging

from todo_api.errors import Forbidden, NotFound
from todo_api.models.user import Role

logger = logging.getLogger(__name__)


def can_view_all(role) -> bool:
    return Role.parse(role) is Role.ADMIN


def can_mutate(owner_id, requester_id, requester_role) -> bool:
    """Owners may touch their own records; admins may touch any record."""
    return can_view_all(requester_role) or owner_id == requester_id


def authorize_record(record, principal):
    """Return record if principal may read or change it.

    Existence is checked first: a missing record is NotFound for every role,
    admins included.
    """
    if record is None:
        raise NotFound("Task not found")
    if not can_mutate(record.owner_id, principal.user_id, principal.role):
        logger.info("user %s denied access to task %s", principal.user_id, record.id)
        raise Forbidden("Not allowed to access this task")
    return record


def require_admin(principal):
    if not can_view_all(principal.role):
        logger.info("user %s denied admin access", principal.user_id)
        raise Forbidden("Admin role required")
    return principal
