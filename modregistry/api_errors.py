"""Errors raised by API handlers, with their HTTP status and JSON body."""

from __future__ import annotations

from typing import Any

__all__ = [
    "error_body",
    "ApiError",
    "EnvError",
    "FileHostingError",
    "DatabaseError",
    "XmlError",
    "JsonError",
    "AuthenticationError",
    "InvalidInputError",
    "ValidationError",
    "SearchError",
    "IndexingError",
    "AnalyticsError",
    "CryptoError",
    "PaymentsError",
    "DiscordError",
    "DecodingApiError",
    "ImageError",
]


def error_body(error: str, description: str) -> dict[str, str]:
    """The JSON object every API error is reported as."""
    return {"error": error, "description": description}


class ApiError(Exception):
    """Base class for errors turned into an HTTP error response."""

    status_code: int = 500
    error: str = "internal_error"
    template: str = "{0}"

    def __init__(self, detail: Any = "") -> None:
        self.detail = detail
        super().__init__(self.template.format(detail))

    def to_dict(self) -> dict[str, str]:
        return error_body(self.error, str(self))


class EnvError(ApiError):
    status_code = 500
    error = "environment_error"
    template = "Environment Error"


class FileHostingError(ApiError):
    status_code = 500
    error = "file_hosting_error"
    template = "Error while uploading file"


class DatabaseError(ApiError):
    status_code = 500
    error = "database_error"
    template = "Database Error: {0}"


class XmlError(ApiError):
    status_code = 500
    error = "xml_error"
    template = "Internal server error: {0}"


class JsonError(ApiError):
    status_code = 400
    error = "json_error"
    template = "Deserialization error: {0}"


class AuthenticationError(ApiError):
    status_code = 401
    error = "unauthorized"
    template = "Authentication Error: {0}"


class InvalidInputError(ApiError):
    status_code = 400
    error = "invalid_input"
    template = "Invalid Input: {0}"


class ValidationError(ApiError):
    status_code = 400
    error = "invalid_input"
    template = "Error while validating input: {0}"


class SearchError(ApiError):
    status_code = 500
    error = "search_error"
    template = "Search Error: {0}"


class IndexingError(ApiError):
    status_code = 500
    error = "indexing_error"
    template = "Indexing Error: {0}"


class AnalyticsError(ApiError):
    status_code = 424
    error = "analytics_error"
    template = "Ariadne Error: {0}"


class CryptoError(ApiError):
    status_code = 403
    error = "crypto_error"
    template = "Crypto Error: {0}"


class PaymentsError(ApiError):
    status_code = 424
    error = "payments_error"
    template = "Payments Error: {0}"


class DiscordError(ApiError):
    status_code = 424
    error = "discord_error"
    template = "Discord Error: {0}"


class DecodingApiError(ApiError):
    status_code = 400
    error = "decoding_error"
    template = "Error while decoding Base62: {0}"


class ImageError(ApiError):
    status_code = 400
    error = "invalid_image"
    template = "Image Parsing Error: {0}"