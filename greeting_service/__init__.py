"""Greeting service package.

Serves a single in-memory greeting over HTTP and lets clients replace it. The
layers follow the usual split: ``domain`` entities, ``application`` use cases,
``infrastructure`` storage and ``interfaces.api`` for the FastAPI routes.
"""
