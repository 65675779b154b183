"""
Application package initializer.

The service publishes a catalog of clinical concepts (nodes of an
"is‑a / has‑child" graph) over a small HTTP API.  The code is
organised in layers: ``core`` (settings, logging, database, errors),
``schemas`` (pydantic models), ``services`` (store, tabular loader and
catalog orchestration) and ``api`` (FastAPI routers).
"""
