"""
Pydantic schemas for API request and response validation.

Loosely structured inputs (model replies, discovery JSON) are coerced into
these models instead of being rejected.
"""
