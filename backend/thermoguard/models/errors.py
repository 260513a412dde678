"""
Error Envelope Models
=====================

When the API answers with a non-2xx status, the body can look like any
of these (the .NET backend uses all of them depending on where the error
came from):

    {"message": "Sensor não encontrado"}                 -> MessageEnvelope
    {"title": "One or more validation errors occurred."} -> TitleEnvelope
    {"errors": {"Temperatura": ["must be <= 100"]}}      -> ErrorsEnvelope
    {"message": 404} (not a string)                      -> next shape / fallback
    anything else (or no body at all)                    -> UnrecognizedEnvelope

parse_error_envelope() tries the shapes IN THAT ORDER and returns the
first one that fits. Every envelope can produce exactly one message via
to_message().

"message" and "title" must be non-empty strings. A body like
{"message": 404} or {"title": null} does not match that shape and falls
through to the next one (usually the status fallback).
"""

from typing import Any, Union

from pydantic import BaseModel, Field, ValidationError, field_validator


class MessageEnvelope(BaseModel):
    """Body with a non-empty "message" string."""
    message: str = Field(..., min_length=1)

    def to_message(self) -> str:
        return self.message


class TitleEnvelope(BaseModel):
    """Body with a non-empty "title" string (ASP.NET ProblemDetails)."""
    title: str = Field(..., min_length=1)

    def to_message(self) -> str:
        return self.title


class ErrorsEnvelope(BaseModel):
    """
    Body with an "errors" mapping of field name -> list of messages.

    A bare string is accepted in place of a list. The mapping must hold at
    least one message, otherwise the body is not this shape.
    """
    errors: dict[str, Union[list[str], str]]

    @field_validator("errors")
    @classmethod
    def must_have_messages(cls, value):
        if not _flatten(value):
            raise ValueError("errors mapping has no messages")
        return value

    def messages(self) -> list[str]:
        return _flatten(self.errors)

    def to_message(self) -> str:
        return ", ".join(self.messages())


class UnrecognizedEnvelope(BaseModel):
    """Fallback when the body is missing, not JSON, or not a known shape."""
    status_code: int
    reason: str = ""

    def to_message(self) -> str:
        return f"Erro {self.status_code}: {self.reason}"


ErrorEnvelope = Union[MessageEnvelope, TitleEnvelope, ErrorsEnvelope, UnrecognizedEnvelope]

# Checked in priority order
_RECOGNIZED_SHAPES = (MessageEnvelope, TitleEnvelope, ErrorsEnvelope)


def _flatten(errors: dict) -> list[str]:
    flat = []
    for value in errors.values():
        if isinstance(value, str):
            flat.append(value)
        else:
            flat.extend(value)
    return flat


def parse_error_envelope(body: Any, status_code: int, reason: str = "") -> ErrorEnvelope:
    """
    Match an already-decoded error body against the known shapes.

    Args:
        body: Decoded JSON (None if the body was empty or not JSON)
        status_code: HTTP status, used by the fallback message
        reason: HTTP reason phrase, used by the fallback message

    Returns:
        The first matching envelope, or an UnrecognizedEnvelope
    """
    if isinstance(body, dict):
        for shape in _RECOGNIZED_SHAPES:
            try:
                return shape.model_validate(body)
            except ValidationError:
                continue
    return UnrecognizedEnvelope(status_code=status_code, reason=reason)
