"""
Users API endpoints

Mounted under /users. Each handler validates transport input, calls the
user service, and lets handle_api_errors map domain outcomes to status codes.
"""
from fastapi import APIRouter, Depends, Response
from typing import List

from constants import HTTPStatus, ErrorMessages, UserLimits
from dependencies import get_user_service
from dtos.request.user_request import UserRequest
from dtos.response.user_response import UserResponse
from exceptions import ValidationError
from services.interfaces import IUserService
from utils.error_handlers import handle_api_errors

router = APIRouter()


def parse_user_id(raw: str) -> int:
    """
    Parse a path identifier into a user id.

    Only plain decimal digits in 1..ID_MAX are accepted.

    Raises:
        ValidationError: If the id is non-numeric or out of range
    """
    if not raw.isascii() or not raw.isdigit():
        raise ValidationError(ErrorMessages.INVALID_ID, {"id": raw})
    user_id = int(raw)
    if not 1 <= user_id <= UserLimits.ID_MAX:
        raise ValidationError(ErrorMessages.INVALID_ID, {"id": raw})
    return user_id


@router.post(
    "",
    response_model=UserResponse,
    response_model_exclude_none=True,
    status_code=HTTPStatus.CREATED,
)
@router.post(
    "/",
    response_model=UserResponse,
    response_model_exclude_none=True,
    status_code=HTTPStatus.CREATED,
    include_in_schema=False,
)
@handle_api_errors("Create user")
def create_user(payload: UserRequest, service: IUserService = Depends(get_user_service)):
    """Create a user. The response carries no age."""
    return service.create_user(payload)


@router.get("", response_model=List[UserResponse])
@router.get("/", response_model=List[UserResponse], include_in_schema=False)
@handle_api_errors("List users")
def list_users(service: IUserService = Depends(get_user_service)):
    """List all users with derived age. Always a JSON array."""
    return service.list_users()


@router.get("/{user_id}", response_model=UserResponse)
@handle_api_errors("Get user")
def get_user(user_id: str, service: IUserService = Depends(get_user_service)):
    """Get a single user with derived age."""
    return service.get_user(parse_user_id(user_id))


@router.put("/{user_id}", response_model=UserResponse, response_model_exclude_none=True)
@handle_api_errors("Update user")
def update_user(user_id: str, payload: UserRequest, service: IUserService = Depends(get_user_service)):
    """Replace a user's name and dob. The response carries no age."""
    return service.update_user(parse_user_id(user_id), payload)


@router.delete("/{user_id}", status_code=HTTPStatus.NO_CONTENT, response_class=Response)
@handle_api_errors("Delete user")
def delete_user(user_id: str, service: IUserService = Depends(get_user_service)):
    """Delete a user. Deleting an absent id also returns 204."""
    service.delete_user(parse_user_id(user_id))
    return Response(status_code=HTTPStatus.NO_CONTENT)
