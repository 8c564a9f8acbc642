"""Prompt Factory: turns a structured form into provider-specific prompts."""

__version__ = "0.1.0"
