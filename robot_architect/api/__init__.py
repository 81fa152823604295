"""Interface adapters package.

Architectural role:
    Exposes HTTP (`http_api`, served by `uvicorn robot_architect.api.http_api:app`)
    and terminal (`cli`) entrypoints over `robot_architect.core.engine.generate_robot_from_prompt`.
"""
