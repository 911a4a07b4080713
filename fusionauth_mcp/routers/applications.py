"""
Application REST API endpoints.

- GET /applications - List applications
- POST /applications - Create an application
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from fusionauth_mcp.routers.responses import InvalidBodyError, read_json_body, run_operation

router = APIRouter(prefix="/applications", tags=["applications"])


@router.get("")
async def get_applications() -> JSONResponse:
    """List all applications."""
    return await run_operation("get_applications", None)


@router.post("")
async def create_application(request: Request) -> JSONResponse:
    """Create an application. Body: name, roles, oauthConfiguration, jwtConfiguration."""
    try:
        body = await read_json_body(request)
    except InvalidBodyError as e:
        return JSONResponse(content={"error": str(e)}, status_code=400)
    return await run_operation("create_application", body)
