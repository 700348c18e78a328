"""
Exceptions raised by the service layer.

Only store access raises. Model invocation and response normalization
report failures as tagged results (see career_backend/agents/recommendation/types.py).
"""


class StoreError(Exception):
    """A Supabase read or write failed, or the store is not configured."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"{operation}: {message}")
