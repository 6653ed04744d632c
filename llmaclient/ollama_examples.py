"""Example requests against a local Ollama server."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from llmaclient.gollama import (
    DEFAULT_LOCAL_BASE_URL,
    DEFAULT_TIMEOUT,
    Client,
    GenerateRequest,
    GenerateResponse,
    encode_base64,
)

TEXT_MODEL = "llama3.2:1b"
VISION_MODEL = "llava"
RECTANGLE_PROMPT = "What is the formula for calculating the area of a rectangle?"
IMAGE_PROMPT = "Is this a picture of a cat?"
RECTANGLE_AREA_PROMPT = (
    "What is the area of a rectangle with height 2m and width 1m? Respond in JSON"
)
CIRCLE_AREA_PROMPT = "What is the area of a circle with radius 1m? Respond in JSON"
AREA_SCHEMA = {
    "type": "object",
    "properties": {
        "height": {"type": "integer"},
        "width": {"type": "integer"},
        "area": {"type": "integer"},
    },
    "required": ["height", "width", "area"],
}


def read_image(fname: str, directory: str | Path | None = None) -> bytes:
    """Read an image from `directory`, by default ./testdata."""
    base = Path.cwd() / "testdata" if directory is None else Path(directory)
    return (base / fname).read_bytes()


def ask_about_image(client: Client, image: bytes) -> list[GenerateResponse]:
    """Ask the vision model whether the image shows a cat."""
    request = GenerateRequest(
        model=VISION_MODEL,
        prompt=IMAGE_PROMPT,
        images=[encode_base64(image)],
    )
    return client.generate(request)


def area_examples(client: Client) -> list[GenerateResponse]:
    """Ask for areas, first with a JSON schema, then with plain JSON format."""
    area_requests = [
        GenerateRequest(model=TEXT_MODEL, prompt=RECTANGLE_AREA_PROMPT, format=AREA_SCHEMA),
        GenerateRequest(model=TEXT_MODEL, prompt=CIRCLE_AREA_PROMPT, format="json"),
    ]
    return [response for request in area_requests for response in client.generate(request)]


def _rectangle_formula(client: Client, stream: bool) -> list[GenerateResponse]:
    return client.generate(GenerateRequest(model=TEXT_MODEL, prompt=RECTANGLE_PROMPT, stream=stream))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ollama-examples", description="Run example requests.")
    parser.add_argument("command", choices=["generate", "stream", "image", "area"])
    parser.add_argument("--base-url", default=DEFAULT_LOCAL_BASE_URL)
    parser.add_argument("--timeout", type=int, default=DEFAULT_TIMEOUT)
    parser.add_argument("--image-dir", default=None)
    parser.add_argument("--image-name", default="cat.jpeg")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    client = Client(args.timeout, args.base_url)
    try:
        if args.command == "image":
            image = read_image(args.image_name, args.image_dir)
            print("Response:", ask_about_image(client, image))
            return 0
        if args.command == "area":
            results = area_examples(client)
        else:
            results = _rectangle_formula(client, stream=args.command == "stream")
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    for response in results:
        print(response)
    return 0