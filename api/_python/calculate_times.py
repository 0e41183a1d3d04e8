#!/usr/bin/env python3
"""
Run a sleep calculator tool from a JSON request file.

Usage: python3 calculate_times.py <request_file.json>

The request file holds {"tool_name": "...", "arguments": {...}}. The result
is written as JSON to stdout; failures print {"error": "..."} and exit 1.
"""

import json
import logging
import sys

# Assumes api/_python is on the path or the script is run from there
from calculator_tools import invoke_tool
from sleepcycle import config

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if len(sys.argv) != 2:
        print(json.dumps({"error": "Usage: calculate_times.py <request_file.json>"}))
        sys.exit(1)

    request_file = sys.argv[1]

    try:
        with open(request_file) as f:
            data = json.load(f)

        result = invoke_tool(data["tool_name"], data.get("arguments", {}))
        print(json.dumps(result))

    except FileNotFoundError:
        print(json.dumps({"error": f"Request file not found: {request_file}"}))
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(json.dumps({"error": f"Invalid JSON in request file: {e}"}))
        sys.exit(1)
    except KeyError as e:
        print(json.dumps({"error": f"Missing required field: {e}"}))
        sys.exit(1)
    except ValueError as e:
        print(json.dumps({"error": str(e)}))
        sys.exit(1)
    except Exception as e:
        logger.exception("Calculation failed for %s", request_file)
        print(json.dumps({"error": f"Calculation failed: {e}"}))
        sys.exit(1)


if __name__ == "__main__":
    main()
