"""Users — CRUD endpoints over the in-memory UserStore.

Invariants:
    - Ids are always generated by the store; request bodies never carry one
    - Every response is built from the store's confirmed outcome
    - Store errors (validation 400, not-found 404) propagate to the ApiCrudError handler

Design Decisions:
    - DELETE returns 200 with the removed record (not 204) so clients see what was removed
    - Malformed path ids rejected by FastAPI UUID parsing (400), before the store is consulted
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from apicrud.api.dependencies import get_user_store
from apicrud.core.domain_types import UserId
from apicrud.core.errors import UserNotFoundError
from apicrud.core.user_store import UserStore
from apicrud.schemas.user import UserPayload, UserResponse

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserPayload, store: UserStore = Depends(get_user_store),
):
    """Create a user; the store assigns its id."""
    record = store.create(body.to_user())
    return UserResponse.from_record(record)


@router.get("", response_model=list[UserResponse])
async def list_users(store: UserStore = Depends(get_user_store)):
    """List every stored user. Order is unspecified."""
    return [UserResponse.from_record(r) for r in store.list()]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID, store: UserStore = Depends(get_user_store),
):
    record = store.get(UserId(user_id))
    if record is None:
        raise UserNotFoundError(str(user_id))
    return UserResponse.from_record(record)


@router.put("/{user_id}", response_model=UserResponse)
async def replace_user(
    user_id: UUID,
    body: UserPayload,
    store: UserStore = Depends(get_user_store),
):
    """Replace every field of an existing user. The id never changes."""
    record = store.replace(UserId(user_id), body.to_user())
    return UserResponse.from_record(record)


@router.delete("/{user_id}", response_model=UserResponse)
async def delete_user(
    user_id: UUID, store: UserStore = Depends(get_user_store),
):
    """Remove a user and return the removed record."""
    record = store.delete(UserId(user_id))
    return UserResponse.from_record(record)
