"""LLM access package.

Architectural role:
    Provides provider configuration, request-payload construction, and transport
    used by `robot_architect.core.engine` to invoke the Gemini generation backend.

Module split:
    - `provider_config`: environment-driven model, endpoint, and key configuration.
    - `service`: prompt-to-payload adapter with structured-output settings.
    - `client`: HTTP transport and response text materialization.
"""
