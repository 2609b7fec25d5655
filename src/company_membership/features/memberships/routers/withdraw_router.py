"""Privileged member withdrawal endpoint.

Deletes the identity behind a membership. Errors use a flat
``{"error": message}`` body, and any identity provider failure is a 500.
The body is read only after the caller is authenticated, so a missing
credential is a 401 whatever the payload looks like.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials

from ....core.exceptions import MembershipError, TransientError, get_http_status_code
from ....dependencies import ServiceContainer, bearer_scheme, get_container, resolve_identity
from ..models.responses import WithdrawMemberResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Members"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _read_member_id(request: Request) -> Any:
    """``memberId`` from a JSON object body; an unreadable body counts as absent."""
    try:
        payload = await request.json()
    except ValueError:
        return None
    return payload.get("memberId") if isinstance(payload, dict) else None


@router.post(
    "/withdraw-member",
    response_model=WithdrawMemberResponse,
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {
                    "schema": {
                        "type": "object",
                        "properties": {"memberId": {"type": "string", "description": "Membership ID"}},
                    }
                }
            }
        }
    },
    responses={
        400: {"description": "memberId missing or not a string"},
        401: {"description": "Missing or invalid credential"},
        403: {"description": "Caller may not withdraw this member"},
        404: {"description": "Member not found"},
        500: {"description": "Identity deletion failed"},
    },
)
async def withdraw_member(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    container: ServiceContainer = Depends(get_container),
):
    try:
        identity = await resolve_identity(credentials, container)
        actor = await container.membership_service.resolve_actor(identity.id)
        member_id = await _read_member_id(request)
        await container.membership_service.withdraw_identity(member_id, actor)
    except TransientError as e:
        logger.error(f"withdraw-member failed: {e.message}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, e.message)
    except MembershipError as e:
        return _error(get_http_status_code(e), e.message)
    except Exception as e:
        logger.exception(f"withdraw-member error: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e) or "Unknown error")

    return WithdrawMemberResponse(success=True, message="Identity deleted")
