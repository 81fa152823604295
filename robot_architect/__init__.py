"""Robot Architect assistant package.

Architectural role:
    Bridges free-text robot design requests to a hosted text-generation model and
    maps the structured reply back into the application's link/joint records.

Subpackages:
    - `core`: adapter orchestration, trigger table, and result contracts.
    - `context`: robot and motor catalog snapshots sent as model context.
    - `prompting`: system instruction text and requested output schema.
    - `llm`: provider configuration, payload construction, and HTTP transport.
    - `parsing`: JSON extraction from free text and robot record mapping.
    - `api`: HTTP and terminal entrypoints.
"""
