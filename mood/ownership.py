# mood/ownership.py
from django.utils.dateparse import parse_date
from rest_framework import permissions
from rest_framework.exceptions import ValidationError
import logging

from analytics.exceptions import EntryValidationError
from analytics.types import Owner

logger = logging.getLogger(__name__)

GUEST_QUERY_PARAM = "guest_id"
GUEST_HEADER = "HTTP_X_GUEST_ID"
MAX_GUEST_ID_LENGTH = 64


def resolve_owner(request):
    """
    Work out whose records a request may touch.

    An authenticated user always wins; otherwise a guest session id is taken
    from the ``guest_id`` query parameter or the ``X-Guest-Id`` header.
    Returns None when neither is present or the guest id is unusable.
    """
    user = getattr(request, "user", None)
    if user is not None and user.is_authenticated:
        return Owner(user_id=user.pk)

    params = getattr(request, "query_params", request.GET)
    guest_id = (params.get(GUEST_QUERY_PARAM) or request.META.get(GUEST_HEADER) or "").strip()
    if not guest_id or len(guest_id) > MAX_GUEST_ID_LENGTH:
        return None

    try:
        return Owner(guest_session_id=guest_id)
    except EntryValidationError as e:
        logger.warning(f"Rejected guest session id: {e.message}")
        return None


def owner_fields(owner):
    """Model field values that attach a new row to an owner"""
    if owner.is_guest:
        return {"user": None, "guest_session_id": owner.guest_session_id}
    return {"user_id": owner.user_id, "guest_session_id": None}


class HasOwner(permissions.BasePermission):
    """Allows signed-in users and guests that identify their session"""

    message = "Authentication or a guest_id is required."

    def has_permission(self, request, view):
        owner = resolve_owner(request)
        request.owner = owner
        return owner is not None


def date_param(request, name):
    """Optional YYYY-MM-DD query parameter; a bad value is a 400"""
    value = request.query_params.get(name)
    if not value:
        return None

    try:
        day = parse_date(value)
    except ValueError:
        day = None
    if day is None:
        raise ValidationError({name: f"'{value}' is not a valid date (YYYY-MM-DD)."})
    return day
