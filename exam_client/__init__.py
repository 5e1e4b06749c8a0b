"""Exam Assistant API Client — async client for the local exam-assistant backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Explicit imports from submodules, no star exports
      (e.g. `from exam_client.infrastructure.exam_api_client import ExamAPIClient`)
"""
