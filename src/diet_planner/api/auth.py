"""Identity endpoints."""

from fastapi import APIRouter, Depends

from diet_planner.api.dependencies import (
    get_container,
    optional_user,
    require_callback_token,
)
from diet_planner.api.schemas import LoginCallback
from diet_planner.containers import AppContainer
from diet_planner.domain.users import LoginIdentity, UserRecord

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/callback", dependencies=[Depends(require_callback_token)])
async def login_callback(
    body: LoginCallback, container: AppContainer = Depends(get_container)
) -> UserRecord:
    """Register or refresh the user behind an external login."""
    return container.user_service.ensure_user(
        LoginIdentity(
            open_id=body.open_id,
            name=body.name,
            email=body.email,
            login_method=body.login_method,
        )
    )


@router.get("/me")
async def me(user: UserRecord | None = Depends(optional_user)) -> UserRecord | None:
    """Return the calling user, or null when anonymous."""
    return user


@router.post("/logout")
async def logout() -> dict[str, bool]:
    """Acknowledge a logout; sessions live in the identity gateway."""
    return {"success": True}
