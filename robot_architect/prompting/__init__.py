"""Prompt assembly package.

Provides the system instruction builder and the structured-output schema
requested from the generation service.
"""
