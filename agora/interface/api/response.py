"""Response envelopes shared by all routes."""

from typing import Any

from pydantic import BaseModel


def _dump(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True)
    if isinstance(data, list):
        return [_dump(item) for item in data]
    return data


def success(data: Any = None, message: str | None = None, **extra: Any) -> dict:
    """Build a success envelope.

    Args:
        data: Payload (pydantic models are dumped with camelCase keys)
        message: Optional human-readable message
        **extra: Additional top-level keys, e.g. pagination

    Returns:
        {"success": true, "data": ..., ...}
    """
    body: dict[str, Any] = {"success": True}
    if data is not None:
        body["data"] = _dump(data)
    if message is not None:
        body["message"] = message
    body.update({key: _dump(value) for key, value in extra.items()})
    return body


def failure(message: str) -> dict:
    """Build an error envelope."""
    return {"success": False, "message": message}
