"""Pydantic Schemas — every wire shape of the API plus the guards over them.

Invariants:
    - Schemas validate at system boundary (request bodies, response payloads)
    - Domain enums from core/ used for enum fields
    - Closed shapes (extra="forbid") unless a shape is explicitly a projection

Design Decisions:
    - Guards live beside the schemas they wrap: one definition per shape (ADR: DDD boundary)
"""
