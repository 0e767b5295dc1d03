"""
Pydantic schema definitions for API payloads and inventory records.
"""
