"""Trainee login endpoint."""

from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Body, status

from app.dependencies import Auth
from app.schemas.auth import ErrorResponse, LoginResponse, TraineeLoginRequest

router = APIRouter()


@router.post(
    "/trainee-login",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    tags=["Authentication"],
    summary="Trainee phone and password login",
    responses={
        400: {"model": ErrorResponse, "description": "Missing phone or password"},
        401: {"model": ErrorResponse, "description": "Invalid phone or password"},
        500: {"model": ErrorResponse, "description": "Trainee store failure"},
    },
)
async def trainee_login(
    auth_service: Auth,
    background_tasks: BackgroundTasks,
    request: Annotated[TraineeLoginRequest | None, Body()] = None,
) -> LoginResponse:
    """
    Verify a trainee's phone and password.

    The returned trainee id is the session handle the client keeps for
    subsequent requests. The last-login timestamp is written after the
    response is sent.

    Args:
        auth_service: Authentication service
        background_tasks: Post-response task queue
        request: Phone and password; an absent body counts as missing fields

    Returns:
        Trainee id and profile
    """
    return await auth_service.authenticate(
        request.phone if request else None,
        request.password if request else None,
        background_tasks=background_tasks,
    )
