"""Caller identity taken from gateway headers."""

from uuid import UUID

from fastapi import Depends, Header, HTTPException, status
from pydantic import BaseModel

MODERATOR_ROLE = "moderator"


class ActorHeaders(BaseModel):
    """Identity forwarded by the upstream gateway."""

    actor_id: str | None = None
    is_moderator: bool = False

    def as_actor(self) -> dict:
        """Fields for use case requests made by an identified actor."""
        return {"actor_id": self.actor_id, "is_moderator": self.is_moderator}

    def as_viewer(self) -> dict:
        """Fields for read requests; the viewer may be anonymous."""
        return {"viewer_id": self.actor_id, "viewer_is_moderator": self.is_moderator}


def actor_headers(
    x_actor_id: str | None = Header(default=None),
    x_actor_role: str | None = Header(default=None),
) -> ActorHeaders:
    """Read ``X-Actor-Id`` and ``X-Actor-Role``.

    Raises:
        HTTPException: If X-Actor-Id is present but not a UUID
    """
    if x_actor_id is None:
        return ActorHeaders()
    try:
        actor_id = str(UUID(x_actor_id))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="X-Actor-Id must be a UUID",
        )
    roles = {r.strip().lower() for r in (x_actor_role or "").split(",")}
    return ActorHeaders(actor_id=actor_id, is_moderator=MODERATOR_ROLE in roles)


def require_actor(headers: ActorHeaders = Depends(actor_headers)) -> ActorHeaders:
    """Identity of a caller that must be known.

    Raises:
        HTTPException: If no X-Actor-Id header was sent
    """
    if headers.actor_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-Actor-Id header required",
        )
    return headers
