"""Current console caller."""

from fastapi import APIRouter
from pydantic import ConfigDict, Field

from src.api.core.dependencies import CurrentCallerDep, PermissionServiceDep
from src.api.core.messages import APIResponse

router = APIRouter(prefix="/session", tags=["session"])


class SessionResponse(APIResponse):
    model_config = ConfigDict(populate_by_name=True)

    uid: str
    email: str | None = None
    role: str | None = None
    can_administer: bool = Field(alias="canAdminister")


@router.get("", response_model=SessionResponse)
async def get_session(
    caller: CurrentCallerDep,
    permissions: PermissionServiceDep,
) -> SessionResponse:
    """Who the caller is and whether they may mutate console state."""
    caller = await permissions.load_caller_record(caller)
    return SessionResponse.success_response(
        uid=caller.uid,
        email=caller.email,
        role=(caller.record or {}).get("role"),
        can_administer=permissions.can_administer(caller),
    )
