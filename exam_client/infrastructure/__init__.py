"""Infrastructure Layer — the HTTP client and logging setup.

Invariants:
    - Infrastructure may import from core/ and schemas/, never the reverse
    - Every transport failure is mapped to an ExamClientError (core/errors.py)
"""
