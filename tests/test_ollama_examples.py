import json

import pytest
import responses

from llmaclient.gollama import GenerateResponse
from llmaclient.ollama_examples import (
    AREA_SCHEMA,
    area_examples,
    ask_about_image,
    main,
    read_image,
)

GENERATE_URL = "http://localhost:11434/api/generate"


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


class RecordingClient:
    def __init__(self):
        self.requests = []

    def generate(self, request):
        self.requests.append(request)
        return [GenerateResponse(model=request.model, response=request.prompt, done=True)]


def test_read_image_from_directory(tmp_path):
    (tmp_path / "cat.jpeg").write_bytes(b"This is a test")
    assert read_image("cat.jpeg", tmp_path) == b"This is a test"


def test_read_image_defaults_to_testdata(tmp_path, monkeypatch):
    (tmp_path / "testdata").mkdir()
    (tmp_path / "testdata" / "cat.jpeg").write_bytes(b"\xff\xd8data")
    monkeypatch.chdir(tmp_path)
    assert read_image("cat.jpeg") == b"\xff\xd8data"


def test_read_image_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_image("cat.jpeg", tmp_path)


def test_ask_about_image_builds_vision_request():
    client = RecordingClient()
    result = ask_about_image(client, b"This is a test")
    (request,) = client.requests
    assert request.model == "llava"
    assert request.prompt == "Is this a picture of a cat?"
    assert request.images == ["VGhpcyBpcyBhIHRlc3Q="]
    assert request.stream is False
    assert result[0].response == "Is this a picture of a cat?"


def test_area_examples_sends_schema_then_json():
    client = RecordingClient()
    results = area_examples(client)
    assert len(client.requests) == 2
    first, second = client.requests
    assert first.format == AREA_SCHEMA
    assert first.format["required"] == ["height", "width", "area"]
    assert second.format == "json"
    assert all(request.model == "llama3.2:1b" for request in client.requests)
    assert [r.response for r in results] == [first.prompt, second.prompt]


def test_main_generate_prints_response(mocked, capsys):
    mocked.add(responses.POST, GENERATE_URL, json={"response": "length times width", "done": True})
    assert main(["generate"]) == 0
    sent = json.loads(mocked.calls[0].request.body)
    assert sent["prompt"] == "What is the formula for calculating the area of a rectangle?"
    assert sent["stream"] is False
    assert "length times width" in capsys.readouterr().out


def test_main_stream_prints_each_chunk(mocked, capsys):
    body = '{"response":"The","done":false}\n{"response":" sky","done":true}\n'
    mocked.add(responses.POST, GENERATE_URL, body=body)
    assert main(["stream"]) == 0
    assert json.loads(mocked.calls[0].request.body)["stream"] is True
    assert len(capsys.readouterr().out.splitlines()) == 2


def test_main_image(mocked, tmp_path, capsys):
    (tmp_path / "cat.jpeg").write_bytes(b"This is a test")
    mocked.add(responses.POST, GENERATE_URL, json={"model": "llava", "response": "yes"})
    assert main(["image", "--image-dir", str(tmp_path)]) == 0
    sent = json.loads(mocked.calls[0].request.body)
    assert sent["images"] == ["VGhpcyBpcyBhIHRlc3Q="]
    assert capsys.readouterr().out.startswith("Response:")


def test_main_image_missing_file(tmp_path, capsys):
    assert main(["image", "--image-dir", str(tmp_path)]) == 1
    assert capsys.readouterr().err.startswith("error:")


def test_main_area_makes_two_requests(mocked, capsys):
    mocked.add(responses.POST, GENERATE_URL, json={"response": "{}"})
    assert main(["area"]) == 0
    formats = [json.loads(call.request.body)["format"] for call in mocked.calls]
    assert formats == [AREA_SCHEMA, "json"]