"""
User endpoints.

CRUD over the in‑memory user collection.  Path ids arrive as plain
strings and request bodies as raw bytes; ``UserService`` decodes and
validates them so that malformed input produces the standard error
envelope with status 400 rather than the framework's own 422 body.
"""

from fastapi import APIRouter, Depends, Request, status

from users_api.app.schemas.envelope import MessageEnvelope, UserEnvelope, UserListEnvelope
from users_api.app.schemas.user import UserPayload
from users_api.app.services.user_service import UserService, get_user_service

router = APIRouter()

# Documents the expected body in OpenAPI without letting FastAPI parse it.
_payload_doc = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": UserPayload.model_json_schema()}},
    }
}


@router.get("", response_model=UserListEnvelope)
async def list_users(service: UserService = Depends(get_user_service)) -> UserListEnvelope:
    return UserListEnvelope(
        status="success",
        message="Users retrieved successfully",
        data=service.list_users(),
    )


@router.get("/{user_id}", response_model=UserEnvelope)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserEnvelope:
    return UserEnvelope(status="success", message="User found", data=service.get_user(user_id))


@router.post(
    "",
    response_model=UserEnvelope,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=_payload_doc,
)
async def create_user(request: Request, service: UserService = Depends(get_user_service)) -> UserEnvelope:
    """Create a user from ``{"name", "email"}``; both must be non‑empty."""
    user = service.create_user(await request.body())
    return UserEnvelope(status="success", message="User created successfully", data=user)


@router.put("/{user_id}", response_model=UserEnvelope, openapi_extra=_payload_doc)
async def update_user(
    user_id: str,
    request: Request,
    service: UserService = Depends(get_user_service),
) -> UserEnvelope:
    """Replace name and email of an existing user.  The id never changes."""
    user = service.update_user(user_id, await request.body())
    return UserEnvelope(status="success", message="User updated successfully", data=user)


@router.delete("/{user_id}", response_model=MessageEnvelope, response_model_exclude_none=True)
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> MessageEnvelope:
    service.delete_user(user_id)
    return MessageEnvelope(status="success", message="User deleted successfully")
