"""Core Layer — pure domain logic, no IO, no async, no framework.

Invariants:
    - No module in core/ imports from schemas/, api/ or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (ADR: ExMA impureim sandwich)
"""
