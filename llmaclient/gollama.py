"""Client for the generate endpoint of a local Ollama server."""

from __future__ import annotations

import base64
import io
import json
from dataclasses import dataclass, field
from typing import Any, Iterable, Union

import requests

DEFAULT_LOCAL_BASE_URL = "http://localhost:11434"
DEFAULT_TIMEOUT = 120  # seconds

_GENERATE_PATH = "/api/generate"


@dataclass
class GenerateRequest:
    """Body of a request to the generate endpoint."""

    model: str
    prompt: str
    suffix: str = ""
    images: list[str] = field(default_factory=list)
    format: Any = ""
    options: Any = None
    system: str = ""
    raw: bool = False
    keep_alive: str = ""
    stream: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body, leaving out empty optional fields."""
        body: dict[str, Any] = {"model": self.model, "prompt": self.prompt}
        optional = {
            "suffix": self.suffix,
            "images": self.images,
            "format": self.format,
            "system": self.system,
            "raw": self.raw,
            "keep_alive": self.keep_alive,
        }
        body.update({key: value for key, value in optional.items() if value})
        if self.options is not None:
            body["options"] = self.options
        body["stream"] = self.stream
        return body


# JSON key -> (attribute name, expected type)
_RESPONSE_FIELDS: dict[str, tuple[str, type]] = {
    "model": ("model", str),
    "created_at": ("created", str),
    "response": ("response", str),
    "done": ("done", bool),
    "context": ("context", list),
    "total_duration": ("total_duration", int),
    "load_duration": ("load_duration", int),
    "prompt_eval_count": ("prompt_eval_count", int),
    "prompt_eval_duration": ("prompt_eval_duration", int),
    "eval_count": ("eval_count", int),
    "eval_duration": ("eval_duration", int),
}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class GenerateResponse:
    """One response object returned by the generate endpoint."""

    model: str = ""
    created: str = ""
    response: str = ""
    done: bool = False
    context: list[int] = field(default_factory=list)
    total_duration: int = 0
    load_duration: int = 0
    prompt_eval_count: int = 0
    prompt_eval_duration: int = 0
    eval_count: int = 0
    eval_duration: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "GenerateResponse":
        """Build a response from decoded JSON; unknown keys are ignored.

        Raises ValueError when the data is not an object or a known key
        holds a value of the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError("generate response must be a JSON object")
        values: dict[str, Any] = {}
        for key, (name, kind) in _RESPONSE_FIELDS.items():
            value = data.get(key)
            if value is None:
                continue
            if kind is int:
                valid = _is_int(value)
            elif kind is list:
                valid = isinstance(value, list) and all(_is_int(item) for item in value)
            else:
                valid = isinstance(value, kind)
            if not valid:
                raise ValueError(f"field {key!r} has an invalid value: {value!r}")
            values[name] = list(value) if kind is list else value
        return cls(**values)


def parse_generate_stream(lines: Iterable[Union[str, bytes]]) -> list[GenerateResponse]:
    """Parse newline-delimited JSON responses, skipping lines that do not parse.

    Each line is expected to keep its newline; an unterminated final line
    marks the end of the stream and is dropped.
    """
    responses: list[GenerateResponse] = []
    for line in lines:
        if isinstance(line, bytes):
            line = line.decode("utf-8", errors="replace")
        if not line.endswith("\n"):
            break
        if not line.startswith("{"):
            continue
        try:
            responses.append(GenerateResponse.from_dict(json.loads(line)))
        except ValueError:
            continue
    return responses


def encode_base64(data: bytes) -> str:
    """Encode bytes as standard base64 text."""
    return base64.b64encode(data).decode("ascii")


def _join_url(base_url: str, path: str) -> str:
    return base_url.rstrip("/") + "/" + path.lstrip("/")


class Client:
    """HTTP client for the generate endpoint."""

    def __init__(self, timeout: int = DEFAULT_TIMEOUT, base_url: str = DEFAULT_LOCAL_BASE_URL):
        self.timeout = timeout
        self.base_url = base_url

    def generate(self, request: GenerateRequest) -> list[GenerateResponse]:
        """Send a generate request and return the responses received."""
        endpoint = _join_url(self.base_url, _GENERATE_PATH)
        response = requests.post(
            endpoint,
            json=request.to_dict(),
            timeout=self.timeout or None,
        )
        with response:
            if request.stream:
                return parse_generate_stream(io.StringIO(response.text))
            return [GenerateResponse.from_dict(response.json())]