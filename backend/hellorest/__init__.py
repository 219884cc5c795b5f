"""
HelloRest — Application Package Initializer
============================================

What: Marks the `hellorest` directory as a Python package and exposes the version.
Who:  Used by pytest, uvicorn and the health route (version reporting).

Architecture Note:
    ┌─────────────────────────────────────┐
    │    Middleware (request id, access   │  ← cross-cutting concerns
    │    log, error normalizer)           │
    ├─────────────────────────────────────┤
    │    Route Table (routes/registry)    │  ← method + path → handler
    ├─────────────────────────────────────┤
    │    Services (Greeter)               │  ← greeting component
    ├─────────────────────────────────────┤
    │    Schemas (TokenExchangeRequest,   │  ← request/response payloads
    │    Message)                         │
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
