"""Core orchestration package.

Architectural role:
    Exposes the prompt adapter that sits between API/CLI entrypoints and the
    lower-level subsystems (context snapshots, prompting, LLM transport, parsing).

Composition:
    - `engine`: main control flow for one prompt-to-robot request.
    - `triggers`: static exact-match prompt table that bypasses generation.
    - `response_types`: action labels and result record helpers.

Determinism and side effects:
    Package import itself is deterministic and side-effect free. Network side
    effects are performed by `engine` during request processing.
"""
