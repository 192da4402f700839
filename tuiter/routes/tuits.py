"""
Tuiter Backend — Tuit Route Handlers
======================================

What:  RESTful API for the tuits resource.
How:   Each handler forwards its path/body parameters to TuitDao and
       returns the result as JSON with status 200.

Update and delete read the `tid` path parameter of /tuits/{tid}; earlier
handlers read an unpopulated `tuitId` parameter instead and never matched
a document.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from tuiter.daos.tuit_dao import TuitDao, get_tuit_dao
from tuiter.models.tuit import Tuit
from tuiter.schemas.common import DeleteStatus, ErrorResponse, UpdateStatus
from tuiter.schemas.tuit import TuitCreate, TuitUpdate

router = APIRouter(tags=["Tuits"])


@router.get(
    "/tuits",
    response_model=List[Tuit],
    summary="List all tuits",
)
async def find_all_tuits(dao: TuitDao = Depends(get_tuit_dao)) -> List[Tuit]:
    return await dao.find_all_tuits()


@router.get(
    "/users/{uid}/tuits",
    response_model=List[Tuit],
    summary="List the tuits posted by a user",
)
async def find_tuits_by_user(uid: str, dao: TuitDao = Depends(get_tuit_dao)) -> List[Tuit]:
    return await dao.find_tuits_by_user(uid)


@router.get(
    "/tuits/{tid}",
    response_model=Optional[Tuit],
    summary="Get a single tuit by ID",
    description="Returns the tuit, or `null` (still 200) when no tuit has this ID.",
)
async def find_tuit_by_id(tid: str, dao: TuitDao = Depends(get_tuit_dao)) -> Optional[Tuit]:
    return await dao.find_tuit_by_id(tid)


@router.post(
    "/users/{uid}/tuits",
    response_model=Tuit,
    responses={
        200: {"description": "Created tuit including its `_id`", "model": Tuit},
        400: {"description": "Tuit text missing or empty", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Create a tuit for a user",
)
async def create_tuit(
    uid: str,
    body: TuitCreate,
    dao: TuitDao = Depends(get_tuit_dao),
) -> Tuit:
    """
    Create a tuit authored by `uid`.

    The author is taken from the URL: a `postedBy` in the body is ignored.
    """
    return await dao.create_tuit(uid, body)


@router.put(
    "/tuits/{tid}",
    response_model=UpdateStatus,
    responses={
        400: {"description": "A value the stored tuit may not hold", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Update fields of a tuit",
)
async def update_tuit(
    tid: str,
    body: TuitUpdate,
    dao: TuitDao = Depends(get_tuit_dao),
) -> UpdateStatus:
    return await dao.update_tuit(tid, body)


@router.delete(
    "/tuits/{tid}",
    response_model=DeleteStatus,
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="Delete a tuit",
)
async def delete_tuit(tid: str, dao: TuitDao = Depends(get_tuit_dao)) -> DeleteStatus:
    return await dao.delete_tuit(tid)
