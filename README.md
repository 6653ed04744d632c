# llmaclient

Small clients for LLM servers that run on your own machine.

- `llmaclient.gollama` talks to the Ollama `/api/generate` endpoint. It handles
  single and streamed responses, and it can attach images encoded as base64.
- `llmaclient.lmstudio` lists models and requests completions from an LM Studio
  server. It returns the response bodies as raw text.
- `llmaclient.ollama_examples` holds ready-made requests. One asks a question
  about an image. Another asks for answers as structured JSON.

## Installation

```
pip install .
```

To install the test tools too:

```
pip install .[test]
```

## The Ollama client

```python
from llmaclient.gollama import Client, GenerateRequest

client = Client()  # http://localhost:11434 and a 120 s timeout by default
request = GenerateRequest(model="llama3.2:1b", prompt="Why is the sky blue?", stream=True)
for part in client.generate(request):
    print(part.response, end="")
```

`Client(timeout, base_url)` sends requests to `<base_url>/api/generate`. A timeout
of `0` means no timeout.

`Client.generate(request)` returns a list of `GenerateResponse` objects:

- A request that is not streamed returns a list with one item. If the body is not
  valid JSON, or is not a well-formed response object, `ValueError` is raised.
- A streamed request returns one item for each well-formed JSON line. Lines that
  do not start with `{` are skipped, and so are lines that fail to parse. The
  client reads the whole stream before it returns anything.

Network errors are raised as `requests` exceptions. HTTP status codes are not
checked.

`GenerateRequest.to_dict()` builds the JSON body. Empty optional fields are left
out: `suffix`, `images`, `format`, `system`, `raw`, `keep_alive`, and `options`
when it is `None`. `stream` is always sent. `format` can be `"json"` or a JSON
schema given as a dict.

`GenerateResponse.from_dict(data)` builds a response from decoded JSON and
ignores unknown keys. The JSON key `created_at` goes to the `created` attribute.

`parse_generate_stream(lines)` parses newline-delimited JSON that you read
yourself, given as `str` or `bytes`. Each line must keep its trailing newline. A
final line with no newline marks the end of the stream and is dropped.

To send an image, encode it first:

```python
from llmaclient.gollama import encode_base64

with open("cat.jpeg", "rb") as fh:
    image = encode_base64(fh.read())
request = GenerateRequest(model="llava", prompt="Is this a picture of a cat?", images=[image])
```

## The LM Studio helpers

```python
from llmaclient.lmstudio import list_models, complete

print(list_models("http://localhost:1234", 120))
print(complete("gemma-2-2b-it", ["Give me a list of 3 cryptocurrencies"], False,
               "http://localhost:1234", 120))
```

`list_models` sends `GET /v1/models`. `complete` sends `POST /v1/completions`
with a body of `model`, `prompt` (the list of prompts) and `stream`. Both return
the raw response body as text.

## Commands

```
llmaclient-lmstudio models
llmaclient-lmstudio complete [--model MODEL] [--stream] [PROMPT ...]
llmaclient-ollama {generate,stream,image,area}
```

`llmaclient-lmstudio` takes `--base-url` (default `http://localhost:1234`) and
`--timeout` (default 120 seconds) before the subcommand:

- `models` prints the models listing.
- `complete` prints a completion. The default model is `gemma-2-2b-it`. If you
  give no prompts, two built-in prompts are sent.

`llmaclient-ollama` takes `--base-url` (default `http://localhost:11434`) and
`--timeout` (default 120). It runs one of these examples:

- `generate` asks `llama3.2:1b` for the formula for the area of a rectangle.
- `stream` sends the same request, streamed.
- `image` sends an image to `llava` and asks whether it shows a cat. By default
  it reads `testdata/cat.jpeg` from the current directory. `--image-dir` and
  `--image-name` change that.
- `area` asks for areas in JSON: first with a JSON schema, then with the plain
  `"json"` format.

Each command prints what it gets back. If a request fails, it writes an error to
stderr and exits with status 1.

## What this package does not do

- It has no chat client. Only the generate endpoint is covered, so there is no
  message history and there are no conversation turns.
- Streamed responses are not handed over as they arrive. They are collected
  first and then returned as a list.
- The LM Studio helpers do not parse responses. They return raw text.

## Running the tests

```
pytest
```