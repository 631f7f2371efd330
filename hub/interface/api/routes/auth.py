"""Authentication and account routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Request, status
from pydantic import BaseModel

from hub.application.usecase.auth import (
    AuthResponse,
    ChangePasswordRequest,
    ChangePasswordUseCase,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    GetStatsRequest,
    GetStatsResponse,
    GetStatsUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from hub.application.usecase.views import UserView
from hub.domain.service import AuthService, RateLimitService
from hub.interface.api.envelope import Envelope, MessageResponse
from hub.interface.api.request import client_ip, throttle_auth_attempt

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class ChangePasswordAPIRequest(BaseModel):
    """API request for changing the caller's password."""

    current_password: str
    new_password: str
    confirm_password: str


@router.post(
    "/register",
    response_model=Envelope[AuthResponse],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: Request,
    body: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
    rate_limit_service: FromDishka[RateLimitService],
) -> Envelope[AuthResponse]:
    """Create an account and sign the new user in.

    Rate limited per client IP together with login.

    Args:
        request: Raw request (client IP, user agent)
        body: Registration details
        register_use_case: Register use case from DI
        rate_limit_service: Shared rate limiter from DI

    Returns:
        Access token and the new user's profile
    """
    await throttle_auth_attempt(request, rate_limit_service, "REGISTER_ATTEMPT")
    result = await register_use_case.execute(body)
    logger.info(f"REGISTER_SUCCESS: user_id={result.user.id} ip={client_ip(request)}")
    return Envelope(message="User registered successfully", data=result)


@router.post("/login", response_model=Envelope[AuthResponse])
async def login(
    request: Request,
    body: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
    rate_limit_service: FromDishka[RateLimitService],
) -> Envelope[AuthResponse]:
    """Exchange email and password for an access token.

    Args:
        request: Raw request (client IP, user agent)
        body: Credentials
        login_use_case: Login use case from DI
        rate_limit_service: Shared rate limiter from DI

    Returns:
        Access token and the user's profile
    """
    await throttle_auth_attempt(request, rate_limit_service, "LOGIN_ATTEMPT")
    result = await login_use_case.execute(body)
    logger.info(f"LOGIN_SUCCESS: user_id={result.user.id} ip={client_ip(request)}")
    return Envelope(message="Login successful", data=result)


@router.get("/me", response_model=Envelope[UserView])
async def get_me(
    auth_service: FromDishka[AuthService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[UserView]:
    """Get the authenticated user's profile."""
    user = await auth_service.authenticate(authorization)
    profile = await get_current_user_use_case.execute(
        GetCurrentUserRequest(user_id=str(user.id))
    )
    return Envelope(data=profile)


@router.put("/profile", response_model=Envelope[UserView])
async def update_profile(
    body: UpdateProfileRequest,
    auth_service: FromDishka[AuthService],
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[UserView]:
    """Update the caller's profile.

    Only the fields present in the body change. Email, password and role
    cannot be changed here.
    """
    user = await auth_service.authenticate(authorization)
    profile = await update_profile_use_case.execute(str(user.id), body)
    return Envelope(message="Profile updated successfully", data=profile)


@router.put("/password", response_model=MessageResponse)
async def change_password(
    body: ChangePasswordAPIRequest,
    auth_service: FromDishka[AuthService],
    change_password_use_case: FromDishka[ChangePasswordUseCase],
    authorization: str | None = Header(default=None),
) -> MessageResponse:
    """Change the caller's password after checking the current one."""
    user = await auth_service.authenticate(authorization)
    await change_password_use_case.execute(
        ChangePasswordRequest(
            user_id=str(user.id),
            current_password=body.current_password,
            new_password=body.new_password,
            confirm_password=body.confirm_password,
        )
    )
    return MessageResponse(message="Password changed successfully")


@router.post("/logout", response_model=MessageResponse)
async def logout(
    request: Request,
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> MessageResponse:
    """Record a logout. Tokens are stateless, so the client discards its own."""
    user = await auth_service.authenticate(authorization)
    logger.info(f"LOGOUT: user_id={user.id} ip={client_ip(request)}")
    return MessageResponse(message="Logged out successfully")


@router.get("/stats", response_model=Envelope[GetStatsResponse])
async def get_stats(
    auth_service: FromDishka[AuthService],
    get_stats_use_case: FromDishka[GetStatsUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[GetStatsResponse]:
    """User statistics for administrators."""
    user = await auth_service.authenticate(authorization)
    stats = await get_stats_use_case.execute(GetStatsRequest(user_id=str(user.id)))
    return Envelope(data=stats)
