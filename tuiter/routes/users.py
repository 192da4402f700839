"""
Tuiter Backend — User Route Handlers
======================================

What:  RESTful API for the users resource.
How:   Same shape as the tuit routes: one UserDao call per handler.

Credential lookups (UserDao.find_user_by_credentials) have no route here;
login belongs to an authentication layer this service does not provide.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from tuiter.daos.user_dao import UserDao, get_user_dao
from tuiter.models.user import User
from tuiter.schemas.common import DeleteStatus, ErrorResponse, UpdateStatus
from tuiter.schemas.user import UserCreate, UserUpdate

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=List[User], summary="List all users")
async def find_all_users(dao: UserDao = Depends(get_user_dao)) -> List[User]:
    return await dao.find_all_users()


@router.get(
    "/username/{username}",
    response_model=Optional[User],
    summary="Get the first user with a username",
)
async def find_user_by_username(
    username: str, dao: UserDao = Depends(get_user_dao)
) -> Optional[User]:
    return await dao.find_user_by_username(username)


@router.get(
    "/{uid}",
    response_model=Optional[User],
    summary="Get a single user by ID",
    description="Returns the user, or `null` (still 200) when no user has this ID.",
)
async def find_user_by_id(uid: str, dao: UserDao = Depends(get_user_dao)) -> Optional[User]:
    return await dao.find_user_by_id(uid)


@router.post(
    "",
    response_model=User,
    responses={
        400: {"description": "Username or password missing", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Create a user",
)
async def create_user(body: UserCreate, dao: UserDao = Depends(get_user_dao)) -> User:
    return await dao.create_user(body)


@router.put(
    "/{uid}",
    response_model=UpdateStatus,
    responses={400: {"description": "A value the stored user may not hold", "model": ErrorResponse}},
    summary="Update fields of a user",
)
async def update_user(
    uid: str, body: UserUpdate, dao: UserDao = Depends(get_user_dao)
) -> UpdateStatus:
    return await dao.update_user(uid, body)


@router.delete("", response_model=DeleteStatus, summary="Delete every user")
async def delete_all_users(dao: UserDao = Depends(get_user_dao)) -> DeleteStatus:
    return await dao.delete_all_users()


@router.delete(
    "/username/{username}",
    response_model=DeleteStatus,
    summary="Delete all users with a username",
)
async def delete_users_by_username(
    username: str, dao: UserDao = Depends(get_user_dao)
) -> DeleteStatus:
    return await dao.delete_users_by_username(username)


@router.delete("/{uid}", response_model=DeleteStatus, summary="Delete a user")
async def delete_user(uid: str, dao: UserDao = Depends(get_user_dao)) -> DeleteStatus:
    return await dao.delete_user(uid)
