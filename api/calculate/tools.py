"""
Vercel Python Function for sleep calculator tools.

This endpoint handles POST requests to /api/calculate/tools and runs the
requested calculator (bedtimes, wake times, nap, caffeine, sleep debt or
smart alarm).

Request body: {"tool_name": "calculate_bedtimes", "arguments": {...}}

Security:
- Body size limited to 64KB to prevent memory exhaustion
"""

from http.server import BaseHTTPRequestHandler
import json
import logging
import os
import sys
from pathlib import Path

# Add the _python directory to the Python path for importing sleepcycle module
sys.path.insert(0, str(Path(__file__).parent.parent / "_python"))

from calculator_tools import TOOLS, invoke_tool

logger = logging.getLogger(__name__)

MAX_BODY_SIZE = 64 * 1024  # 64KB max request body
ALLOWED_ORIGIN = os.environ.get("SLEEPCYCLE_ALLOWED_ORIGIN", "*")


def validate_request(data: object) -> str | None:
    """Validate request data, return error message or None if valid."""
    if not isinstance(data, dict):
        return "Request body must be a JSON object"

    tool_name = data.get("tool_name")
    if not tool_name:
        return "Missing tool_name"
    if tool_name not in TOOLS:
        return f"Unknown tool: {tool_name}"

    if not isinstance(data.get("arguments", {}), dict):
        return "arguments must be a JSON object"

    return None


class handler(BaseHTTPRequestHandler):
    """HTTP handler for Vercel Python Functions."""

    def do_POST(self):
        """Handle POST requests for calculator tools."""
        try:
            # Check body size before reading (prevent memory exhaustion)
            content_length = int(self.headers.get("Content-Length", 0))
            if content_length < 0:
                self._send_json_response(400, {"error": "Invalid Content-Length"})
                return
            if content_length > MAX_BODY_SIZE:
                self._send_json_response(413, {"error": "Request body too large"})
                return

            body = self.rfile.read(content_length)
            data = json.loads(body)

            validation_error = validate_request(data)
            if validation_error:
                self._send_json_response(400, {"error": validation_error})
                return

            result = invoke_tool(data["tool_name"], data.get("arguments", {}))

            self._send_json_response(200, {"result": result})

        except json.JSONDecodeError:
            self._send_json_response(400, {"error": "Invalid JSON in request body"})
        except KeyError as e:
            self._send_json_response(400, {"error": f"Missing required field: {e}"})
        except ValueError as e:
            # Includes ParseError for malformed times
            self._send_json_response(400, {"error": str(e)})
        except Exception as e:
            logger.exception("Calculator tool failed")
            self._send_json_response(500, {"error": f"Calculation failed: {str(e)}"})

    def _send_json_response(self, status_code: int, data: dict):
        """Send a JSON response with the given status code."""
        self.send_response(status_code)
        self.send_header("Content-Type", "application/json")
        self.send_header("Access-Control-Allow-Origin", ALLOWED_ORIGIN)
        self.end_headers()
        self.wfile.write(json.dumps(data).encode())

    def do_OPTIONS(self):
        """Handle CORS preflight requests."""
        self.send_response(200)
        self.send_header("Access-Control-Allow-Origin", ALLOWED_ORIGIN)
        self.send_header("Access-Control-Allow-Methods", "POST, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
        self.end_headers()
