"""
models/ - Domain Models
=======================
The book schema and its dataclass representation.
"""
