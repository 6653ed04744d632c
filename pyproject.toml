[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "llmaclient"
version = "0.1.0"
description = "Small clients for local LLM servers: the Ollama generate API and LM Studio completions"
requires-python = ">=3.10"
keywords = ["llm", "ollama", "lm-studio", "client", "generate"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
llmaclient-lmstudio = "llmaclient.lmstudio:main"
llmaclient-ollama = "llmaclient.ollama_examples:main"

[tool.hatch.build.targets.wheel]
packages = ["llmaclient"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
