"""Small client for the OpenAI-style endpoints of a local LM Studio server."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

import requests

DEFAULT_BASE_URL = "http://localhost:1234"
DEFAULT_TIMEOUT = 120  # seconds
DEFAULT_MODEL = "gemma-2-2b-it"
DEFAULT_PROMPTS = (
    "Give me a list of 3 cryptocurrencies",
    "Please only present the list in HTML only.",
)


def _url(base_url: str, path: str) -> str:
    return base_url.rstrip("/") + path


def list_models(base_url: str = DEFAULT_BASE_URL, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Return the raw body of the models listing."""
    with requests.get(_url(base_url, "/v1/models"), timeout=timeout) as response:
        return response.text


def complete(
    model: str = DEFAULT_MODEL,
    prompts: Sequence[str] = DEFAULT_PROMPTS,
    stream: bool = False,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Request a completion and return the raw response body."""
    body = {"model": model, "prompt": list(prompts), "stream": stream}
    with requests.post(_url(base_url, "/v1/completions"), json=body, timeout=timeout) as response:
        return response.text


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lmstudio", description="Query a local LM Studio server.")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL)
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT)
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("models", help="list the available models")
    completion = commands.add_parser("complete", help="request a completion")
    completion.add_argument("--model", default=DEFAULT_MODEL)
    completion.add_argument("--stream", action="store_true")
    completion.add_argument("prompts", nargs="*")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "models":
            body = list_models(args.base_url, args.timeout)
        else:
            body = complete(
                args.model,
                args.prompts or DEFAULT_PROMPTS,
                args.stream,
                args.base_url,
                args.timeout,
            )
    except requests.RequestException as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(body)
    return 0