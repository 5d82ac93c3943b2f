"""HTTP endpoints for the User entity."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from tasktracker.application.user_service import UserService
from tasktracker.domain.model.user import User
from tasktracker.infrastructure.api.dependencies import get_user_service
from tasktracker.infrastructure.api.params import parse_id
from tasktracker.infrastructure.api.schemas import UserPayload, UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
def list_users(service: UserService = Depends(get_user_service)) -> list[User]:
    return service.get_all()


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> User:
    return service.get_by_id(parse_id(user_id, "user ID"))


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserPayload,
    service: UserService = Depends(get_user_service),
) -> User:
    return service.create(payload.present_fields())


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: str,
    payload: UserPayload,
    service: UserService = Depends(get_user_service),
) -> User:
    uid = parse_id(user_id, "user ID")
    return service.update(uid, payload.present_fields())


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> Response:
    service.delete(parse_id(user_id, "user ID"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
