from __future__ import annotations

from flask import Flask, request, jsonify
from flask_cors import CORS

from ocr_engine.accounts import decode_blocks
from ocr_engine.config import load_config
from ocr_engine.glyphs import render_accounts
from ocr_engine.logging import configure_logging, get_logger

config = load_config()
configure_logging(config.log_level)
logger = get_logger(__name__)

app = Flask(__name__)
CORS(app)


def _request_lines(data) -> list:
    """
    Accepts {"text": "..."} or {"lines": [...]}.
    """
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    if "lines" in data:
        lines = data["lines"]
        if not isinstance(lines, list) or any(not isinstance(x, str) for x in lines):
            raise ValueError("'lines' must be a list of strings")
    elif "text" in data:
        text = data["text"]
        if not isinstance(text, str):
            raise ValueError("'text' must be a string")
        lines = text.splitlines()
    else:
        raise ValueError("Expected 'text' or 'lines' in request body")

    if len(lines) > config.max_lines:
        raise ValueError(f"Too many lines: {len(lines)} > {config.max_lines}")
    return lines


@app.get("/health")
def health():
    return jsonify({"ok": True})


@app.post("/decode")
def decode():
    try:
        data = request.get_json(force=True, silent=True) or {}
        lines = _request_lines(data)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    accounts = []
    errors = []
    blocks = 0
    for result in decode_blocks(lines):
        blocks += 1
        if result.ok:
            accounts.append(result.account.number)
        else:
            errors.append(result.error.to_dict())

    logger.info("decode_request", blocks=blocks, accounts=len(accounts), errors=len(errors))
    return jsonify({"accounts": accounts, "errors": errors, "blocks": blocks})


@app.post("/render")
def render():
    try:
        data = request.get_json(force=True, silent=True) or {}
        numbers = data.get("accounts") if isinstance(data, dict) else None
        if not isinstance(numbers, list) or any(not isinstance(x, str) for x in numbers):
            raise ValueError("'accounts' must be a list of 9-digit strings")
        lines = render_accounts(numbers)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify({"text": "\n".join(lines), "lines": lines})


if __name__ == "__main__":
    app.run(host=config.api_host, port=config.api_port, debug=config.api_debug)
