"""API Layer — FastAPI glue between envelopes and HTTP.

Invariants:
    - Every response body is a {data, err} envelope
    - Routes registered explicitly in main.py (no auto-discovery)

Design Decisions:
    - Thin glue over core/responses.py: status codes are decided there, not here
"""
