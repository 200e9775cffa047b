"""
Content API — Application Package
===================================

What: HTTP API exposing a path-addressed content tree (files and notebooks).
Who:  Used by uvicorn (`content_api.main:app`) and by pytest.

Architecture Note:

    ┌─────────────────────────────────────┐
    │        Routes (ordered table)       │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (path resolver +         │  ← Validation, template choice,
    │             content dispatcher)     │    error tagging
    ├─────────────────────────────────────┤
    │   Storage (backend + notebooks)     │  ← Read/write/list/move
    └─────────────────────────────────────┘

    Routes never touch storage directly; services never build HTTP responses.
"""

__version__ = "1.0.0"
