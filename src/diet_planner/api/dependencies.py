"""Request-scoped dependencies shared by the routers."""

from fastapi import Depends, Header, HTTPException, Request, status

from diet_planner.containers import AppContainer
from diet_planner.domain.users import UserRecord


def get_container(request: Request) -> AppContainer:
    """Return the container stored on the application state."""
    return request.app.state.container


async def optional_user(
    x_user_open_id: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> UserRecord | None:
    """Resolve the caller from the identity header forwarded by the gateway."""
    if not x_user_open_id:
        return None
    return container.user_service.get_by_open_id(x_user_open_id)


async def require_user(
    user: UserRecord | None = Depends(optional_user),
) -> UserRecord:
    """Reject requests that do not carry a known identity."""
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return user


async def require_callback_token(
    x_auth_token: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> None:
    """Ensure login callbacks come from the identity gateway."""
    if not x_auth_token or x_auth_token != container.settings.auth_callback_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
