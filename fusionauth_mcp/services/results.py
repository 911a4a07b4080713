"""
Normalization of FusionAuth client responses into ToolResult envelopes.

The FusionAuth Python client returns a ClientResponse with `status`,
`success_response`, `error_response` and `was_successful()`. Transport
failures surface as exceptions raised from the call itself. Both paths end
up here, and nothing in this module raises.
"""

from collections.abc import Callable
from typing import Any

from fusionauth_mcp.config.logging import get_logger
from fusionauth_mcp.models.result import ToolResult

logger = get_logger(__name__)

DEFAULT_ERROR = "Request to FusionAuth failed"
INTERNAL_ERROR_STATUS = 500


def extract_error_message(error_response: Any) -> str | None:
    """
    Pull a human-readable message out of a FusionAuth Errors body.

    FusionAuth reports failures as
    `{"generalErrors": [{"code", "message"}], "fieldErrors": {field: [{"code", "message"}]}}`.

    For statuses other than 400 and 404 the client hands back the raw
    requests.Response instead of a decoded body; its JSON is read here.

    Returns:
        The first general error, else the first field error as
        "field: message", else None
    """
    if isinstance(error_response, str):
        return error_response.strip() or None
    if not isinstance(error_response, dict):
        return _error_message_from_http_response(error_response)

    for item in error_response.get("generalErrors") or []:
        if isinstance(item, dict) and item.get("message"):
            return str(item["message"])

    field_errors = error_response.get("fieldErrors") or {}
    if isinstance(field_errors, dict):
        for field, items in field_errors.items():
            for item in items or []:
                if isinstance(item, dict) and item.get("message"):
                    return f"{field}: {item['message']}"

    if error_response.get("message"):
        return str(error_response["message"])
    return None


def _error_message_from_http_response(response: Any) -> str | None:
    read_json = getattr(response, "json", None)
    if not callable(read_json):
        return None
    try:
        body = read_json()
    except ValueError:
        return None
    if isinstance(body, (str, dict)):
        return extract_error_message(body)
    return None


def _status_from_exception(exc: BaseException) -> int | None:
    for attr in ("status_code", "status"):
        value = getattr(exc, attr, None)
        if isinstance(value, int):
            return value
    response = getattr(exc, "response", None)
    value = getattr(response, "status_code", None)
    return value if isinstance(value, int) else None


def normalize_exception(exc: BaseException, operation: str | None = None) -> ToolResult:
    """
    Wrap an exception raised around a vendor call.

    The thrown message is kept; the status code comes from the exception when
    it carries one (requests.HTTPError and friends), else 500.
    """
    message = str(exc) or exc.__class__.__name__
    logger.warning(
        "FusionAuth call raised",
        operation=operation,
        error_type=exc.__class__.__name__,
        error=message,
    )
    return ToolResult.failure(
        f"Internal server error: {message}",
        status_code=_status_from_exception(exc) or INTERNAL_ERROR_STATUS,
    )


def normalize_response(
    response: Any,
    extract: Callable[[dict[str, Any]], Any] | None = None,
    default_error: str = DEFAULT_ERROR,
    operation: str | None = None,
) -> ToolResult:
    """
    Wrap a FusionAuth ClientResponse in the result envelope.

    Args:
        response: ClientResponse returned by the vendor client
        extract: Picks the payload out of the success body (whole body if None)
        default_error: Message used when the error body has none
        operation: Operation name, for logging only

    Returns:
        ToolResult; never raises
    """
    try:
        status = getattr(response, "status", None)
        status = status if isinstance(status, int) else None

        if response.was_successful():
            body = response.success_response
            if body is None:
                body = {}
            data = extract(body) if extract else body
            return ToolResult.ok(data, status_code=status)

        message = extract_error_message(getattr(response, "error_response", None))
        if not message:
            vendor_exception = getattr(response, "exception", None)
            message = str(vendor_exception) if vendor_exception else default_error

        logger.info(
            "FusionAuth reported failure",
            operation=operation,
            status_code=status,
            error=message,
        )
        return ToolResult.failure(message, status_code=status or INTERNAL_ERROR_STATUS)
    except Exception as e:
        return normalize_exception(e, operation)
