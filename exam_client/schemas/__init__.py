"""Pydantic Schemas — wire shapes exchanged with the exam-assistant backend.

Invariants:
    - Field names on the wire are camelCase (aliases); Python attributes are snake_case
"""
