"""
HTTP API adapter for the robot design assistant.

Architectural role:
- Expose the prompt adapter to the browser frontend over JSON HTTP.
- Enforce adapter-level input validation.
- Delegate generation work to `robot_architect.core.engine.generate_robot_from_prompt`.

Endpoint responsibilities:
- `GET /v1/health`: report the configured model and whether a key is present.
- `POST /v1/robot/assist`: validate input, invoke the adapter, return its result.

Input validation behavior:
- Missing or blank `prompt` -> HTTP 400.
- `robot` present but not a JSON object -> HTTP 400.
- `motorLibrary` present but not a JSON object -> HTTP 400.

Error handling strategy:
- Explicit validation failures return structured HTTP 400 JSON responses.
- An adapter `None` result (service/parse failure) returns HTTP 502.
- Unexpected exceptions follow FastAPI default exception handling.

Side effects:
- Prints request/response debug output only when `DEBUG == "true"`.

Run with `uvicorn robot_architect.api.http_api:app`.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from robot_architect.core.engine import generate_robot_from_prompt
from robot_architect.llm.provider_config import DEBUG, MODEL_NAME, get_api_key


app = FastAPI()


# ============================================================
# Request Schema
# ============================================================

class AssistRequest(BaseModel):
    """Assist payload: prompt plus optional robot state and motor catalog."""
    prompt: str
    robot: dict | None = None
    motorLibrary: dict | None = None


def bad_request(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message})


# ============================================================
# Health
# ============================================================

@app.get("/v1/health")
def health():
    """Return service status without contacting the generation backend."""
    return {
        "status": "ok",
        "model": MODEL_NAME,
        "configured": bool(get_api_key()),
    }


# ============================================================
# Assist
# ============================================================

@app.post("/v1/robot/assist")
async def robot_assist(request: Request):
    """
    Run one prompt against the current robot.

    Request body:
    - `prompt` (str, required)
    - `robot` (object, optional): current robot state; defaults to empty.
    - `motorLibrary` (object, optional): brand -> motor specs; defaults to empty.

    Response formatting:
    - 200 with `{explanation, actionType, robotData?}`.
    - 502 with `{"error": ...}` when no actionable result was produced.
    """
    try:
        body = await request.json()
    except ValueError:
        return bad_request("Request body must be JSON")

    if not isinstance(body, dict):
        return bad_request("Request body must be a JSON object")

    if not isinstance(body.get("prompt"), str) or not body["prompt"].strip():
        return bad_request("No prompt provided")

    try:
        payload = AssistRequest.model_validate(body)
    except ValidationError as exc:
        field = ".".join(str(part) for part in exc.errors()[0]["loc"])
        return bad_request(f"Invalid field: {field}")

    prompt = payload.prompt
    robot = payload.robot
    motor_library = payload.motorLibrary

    if DEBUG:
        print("\n==== API DEBUG START ====")
        print("Prompt:", repr(prompt))
        print("Robot:", robot)

    result = await generate_robot_from_prompt(prompt, robot or {}, motor_library or {})

    if DEBUG:
        print("Adapter result:", repr(result))
        print("==== API DEBUG END ====\n")

    if result is None:
        return JSONResponse(status_code=502, content={"error": "No actionable result"})

    return result
