"""Context snapshot package.

Architectural role:
    Reduces live application state (robot, motor catalog) to the compact JSON
    projections embedded in the model system instruction.
"""
