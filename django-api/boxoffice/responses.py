"""Response envelope shared by every API handler."""

from typing import Any

from rest_framework import status as http_status
from rest_framework.response import Response


def success_response(data: Any, message: str, status: int = http_status.HTTP_200_OK) -> Response:
    return Response({"status": "success", "message": message, "data": data}, status=status)


def error_response(message: str, status: int = http_status.HTTP_400_BAD_REQUEST) -> Response:
    return Response({"status": "error", "message": message}, status=status)


def first_error_message(errors: Any) -> str:
    """Flatten DRF serializer errors down to the first human-readable message."""
    if isinstance(errors, dict):
        for value in errors.values():
            return first_error_message(value)
    if isinstance(errors, list) and errors:
        return first_error_message(errors[0])
    return str(errors)
