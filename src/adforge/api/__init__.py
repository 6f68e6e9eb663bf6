"""Adforge — FastAPI REST API layer.

This package wraps the core generation pipeline in an HTTP envelope.

Modules
-------
main
    FastAPI application with all route handlers and the ``main()`` CLI
    entry point.
models
    Pydantic models for API request and response bodies.
strategy
    Visual content strategy consultation prompt.
"""
