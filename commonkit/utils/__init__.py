"""
Generic utility definitions shared across modules.

Includes the exception hierarchy and numeric type definitions.
"""
