"""
User REST API endpoints.

- POST /users - Create a user
- GET /users?userId=...|email=... - Look up a user
- GET /users/{user_id} - Read a user
- POST /users/search - Search users
- PUT /users/{user_id} - Update a user
- DELETE /users/{user_id} - Delete (or deactivate) a user
"""

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from fusionauth_mcp.routers.responses import InvalidBodyError, read_json_body, run_operation

router = APIRouter(prefix="/users", tags=["users"])


def _bad_body(e: InvalidBodyError) -> JSONResponse:
    return JSONResponse(content={"error": str(e)}, status_code=400)


@router.post("")
async def create_user(request: Request) -> JSONResponse:
    """Create a user from a JSON body (email, password, firstName, ...)."""
    try:
        body = await read_json_body(request)
    except InvalidBodyError as e:
        return _bad_body(e)
    return await run_operation("create_user", body)


@router.get("")
async def lookup_user(
    user_id: str | None = Query(None, alias="userId", description="FusionAuth user ID"),
    email: str | None = Query(None, description="Email address"),
) -> JSONResponse:
    """Look up a user by ID or email given as query parameters."""
    arguments = {key: value for key, value in {"userId": user_id, "email": email}.items() if value}
    return await run_operation("get_user", arguments, failure_status=404)


@router.post("/search")
async def search_users(request: Request) -> JSONResponse:
    """Search users. Body: queryString, numberOfResults, startRow, sortFields."""
    try:
        body = await read_json_body(request)
    except InvalidBodyError as e:
        return _bad_body(e)
    return await run_operation("search_users", body)


@router.get("/{user_id}")
async def get_user(user_id: str) -> JSONResponse:
    """Read a user by ID."""
    return await run_operation("get_user", {"userId": user_id}, failure_status=404)


@router.put("/{user_id}")
async def update_user(user_id: str, request: Request) -> JSONResponse:
    """
    Update a user.

    The body is either the fields to change or {"user": {...fields}}.
    """
    try:
        body = await read_json_body(request)
    except InvalidBodyError as e:
        return _bad_body(e)

    user = body.get("user", body) if isinstance(body, dict) else body
    return await run_operation("update_user", {"userId": user_id, "user": user})


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    hard_delete: bool | None = Query(
        None, alias="hardDelete", description="false deactivates instead of deleting"
    ),
) -> JSONResponse:
    """Delete a user."""
    arguments: dict = {"userId": user_id}
    if hard_delete is not None:
        arguments["hardDelete"] = hard_delete
    return await run_operation("delete_user", arguments)
