"""Clients for local LLM servers: the Ollama generate API, LM Studio, and example requests."""

__version__ = "0.1.0"
__all__ = ["gollama", "lmstudio", "ollama_examples"]