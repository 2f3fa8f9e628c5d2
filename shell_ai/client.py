"""
shell-ai completion service client.

Contains:
- join_phrase / build_payload: request body construction
- parse_response: validates the JSON body into a CompletionResponse
- request_completion: the single POST, returning a CompletionResult
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

import requests

from .config import SHELL_AI_URL
from .timing import status, step


class ResponseParseError(ValueError):
    """Body was not JSON, or did not have the expected shape."""


class FailureKind(Enum):
    HTTP_STATUS = "http_status"
    UNPARSEABLE = "unparseable"
    NO_COMPLETION = "no_completion"
    REQUEST = "request"


@dataclass(frozen=True)
class CompletionResponse:
    completion: Optional[str] = None

    @property
    def has_completion(self) -> bool:
        return self.completion is not None


@dataclass(frozen=True)
class CompletionResult:
    """Either a completion or a tagged failure with a printable detail."""

    completion: Optional[str] = None
    failure: Optional[FailureKind] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, completion: str) -> "CompletionResult":
        return cls(completion=completion)

    @classmethod
    def error(cls, kind: FailureKind, detail: str = "") -> "CompletionResult":
        return cls(failure=kind, detail=detail)


def join_phrase(words: Iterable[str]) -> str:
    return " ".join(words)


def build_payload(user_key: str, phrase: str) -> dict:
    return {"userID": user_key, "phrase": phrase}


def parse_response(body: str) -> CompletionResponse:
    try:
        data = json.loads(body)
    except (ValueError, RecursionError) as e:
        raise ResponseParseError(f"response is not JSON: {e}") from e

    if not isinstance(data, dict):
        raise ResponseParseError(f"expected a JSON object, got {type(data).__name__}")

    completion = data.get("completion")
    if completion is not None and not isinstance(completion, str):
        raise ResponseParseError(f"'completion' must be a string, got {type(completion).__name__}")
    return CompletionResponse(completion=completion)


def _status_description(r: requests.Response) -> str:
    return r.reason or f"HTTP {r.status_code}"


def request_completion(
    user_key: str,
    phrase: str,
    *,
    url: str = SHELL_AI_URL,
    session: Optional[requests.Session] = None,
) -> CompletionResult:
    """
    POST the phrase to the completion service and interpret the reply.
    Never raises for transport or response problems; those come back as a
    failed CompletionResult.
    """
    post = session.post if session is not None else requests.post

    try:
        with step(f"POST {url}"):
            r = post(url, json=build_payload(user_key, phrase))
    except requests.RequestException as e:
        status(f"Request error: {e!r}")
        return CompletionResult.error(FailureKind.REQUEST, str(e))

    status(f"Response status: {r.status_code}")
    if r.status_code != 200:
        return CompletionResult.error(FailureKind.HTTP_STATUS, _status_description(r))

    try:
        parsed = parse_response(r.text)
    except ResponseParseError as e:
        status(str(e))
        return CompletionResult.error(FailureKind.UNPARSEABLE, str(e))

    if not parsed.has_completion:
        return CompletionResult.error(FailureKind.NO_COMPLETION)
    return CompletionResult.success(parsed.completion)
