"""
Minimal interactive CLI entrypoint for the robot design assistant.

Architectural role:
- Provides a terminal-only interface over the prompt adapter.
- Keeps a working robot in memory so consecutive prompts can refine it.
- Delegates prompt processing to `robot_architect.core.engine.generate_robot_from_prompt`.

Request lifecycle (per user turn):
1. Read a single line from stdin.
2. Handle local control commands (`exit`/`quit`, `reset`).
3. Forward regular prompts to the adapter with the working robot and motor catalog.
4. Print the action type and explanation; adopt returned robot data as the
   working robot and optionally write it to `--save`.

Input validation behavior:
- Empty input is ignored and does not call the adapter.
- Unreadable `--robot` / `--motors` files abort startup with a message.

Error handling strategy:
- Handles EOF and keyboard interrupts without traceback output.
- A `None` adapter result prints a generic failure line and keeps the session.
"""

import argparse
import asyncio
import json
import logging
import sys

from robot_architect.core.engine import generate_robot_from_prompt


# =========================================================
# UTF-8 SAFE STDOUT
# Configures best-effort UTF-8 console output without failing startup.
# =========================================================

if hasattr(sys.stdout, "reconfigure"):
    try:
        sys.stdout.reconfigure(encoding="utf-8", errors="ignore")
    except (AttributeError, ValueError):
        pass


EMPTY_ROBOT = {"name": "new_robot", "links": {}, "joints": {}, "rootLinkId": None}


def load_json_file(path, default):
    """Load a JSON document, returning `default` when no path is given."""
    if not path:
        return default
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def save_json_file(path, data):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def format_result(result) -> str:
    """Render an adapter result for terminal output."""
    if result is None:
        return "No actionable result. Try again."

    lines = [f"[{result.get('actionType')}] {result.get('explanation') or ''}".rstrip()]

    robot = result.get("robotData")
    if robot is not None:
        lines.append(
            f"Robot '{robot['name']}': {len(robot['links'])} links, "
            f"{len(robot['joints'])} joints, root={robot['rootLinkId']}"
        )

    return "\n".join(lines)


def build_parser():
    parser = argparse.ArgumentParser(description="Robot design assistant")
    parser.add_argument("--robot", help="JSON file with the starting robot state")
    parser.add_argument("--motors", help="JSON file mapping brand -> motor specs")
    parser.add_argument("--save", help="Write each returned robot to this JSON file")
    return parser


# =========================================================
# MAIN APPLICATION LOOP
# =========================================================

def main(argv=None):
    """
    Run the interactive terminal session.

    Returns:
        Process exit code.
    """
    logging.basicConfig(level=logging.WARNING)
    args = build_parser().parse_args(argv)

    try:
        initial_robot = load_json_file(args.robot, EMPTY_ROBOT)
        motor_library = load_json_file(args.motors, {})
    except (OSError, json.JSONDecodeError) as exc:
        print(f"Failed to load input: {exc}")
        return 1

    robot = initial_robot

    print("Robot Architect started. (Type 'exit' to quit, 'reset' to restore the starting robot)\n")
    print("-" * 60)

    while True:

        try:
            prompt = input("Prompt: ").strip()

        except EOFError:
            print()
            break

        except KeyboardInterrupt:
            print("\nInterrupted.")
            break

        if not prompt:
            continue

        if prompt.lower() in ("exit", "quit"):
            print("Shutting down.")
            break

        if prompt.lower() == "reset":
            robot = initial_robot
            print("Robot reset.")
            continue

        result = asyncio.run(generate_robot_from_prompt(prompt, robot, motor_library))
        print("\n" + format_result(result))

        if result is not None and result.get("robotData") is not None:
            robot = result["robotData"]
            if args.save:
                save_json_file(args.save, robot)
                print(f"Saved to {args.save}")

        print("\n" + "-" * 60 + "\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
