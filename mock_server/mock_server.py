from __future__ import annotations

import logging
import os
import sys
import threading
from datetime import datetime
from functools import wraps
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv
from flask import Flask, jsonify, request

logger = logging.getLogger(__name__)


def _resource_path(rel: str) -> Path:
    """
    Resolve resource paths in both development and PyInstaller frozen mode.

    - In dev: resources are on disk next to this file.
    - In frozen: bundled files live under sys._MEIPASS.
    """
    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        return Path(sys._MEIPASS) / rel  # type: ignore[attr-defined]
    return Path(__file__).resolve().parent / rel


# Load .env from EXE directory (so it stays editable in production)
EXE_DIR = Path(sys.executable).resolve().parent if getattr(sys, "frozen", False) else Path(__file__).resolve().parent
load_dotenv(EXE_DIR / ".env")

DEFAULT_FIXTURE = _resource_path("fixture.yaml")


def _now_iso() -> str:
    return datetime.now().isoformat(timespec="seconds")


def load_fixture(path: Optional[Path]) -> Dict[str, List[Dict[str, Any]]]:
    """
    Load seed alarms and views from a YAML fixture.

    Missing file or missing keys yield empty collections.
    """
    if path is None or not path.exists():
        return {"alarms": [], "views": []}
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError("fixture must contain a YAML mapping at the root")
    return {
        "alarms": list(data.get("alarms") or []),
        "views": list(data.get("views") or []),
    }


class MockState:
    """In-memory alarms and views served by the mock management system."""

    def __init__(self, alarms: List[Dict[str, Any]], views: List[Dict[str, Any]], fail_alarms: bool = False):
        self.alarms = alarms
        self.views = views
        self.fail_alarms = fail_alarms
        self.lock = threading.Lock()


def create_app(
    fixture: Optional[Path] = None,
    token: Optional[str] = None,
    fail_alarms: Optional[bool] = None,
) -> Flask:
    """
    Build the mock management system API.

    Parameters
    ----------
    fixture
        YAML fixture with seed ``alarms`` and ``views``. Defaults to
        MOCK_FIXTURE, then the bundled fixture.yaml.
    token
        Bearer token required on /api/* routes. Defaults to MOCK_TOKEN.
    fail_alarms
        If True, the active-alarms endpoint answers 503. Defaults to MOCK_FAIL.
    """
    if fixture is None:
        env_fixture = os.getenv("MOCK_FIXTURE")
        fixture = Path(env_fixture) if env_fixture else DEFAULT_FIXTURE
    expected_token = token if token is not None else os.getenv("MOCK_TOKEN", "dev-token")
    if fail_alarms is None:
        fail_alarms = os.getenv("MOCK_FAIL", "0").lower() in ("1", "true", "yes")

    seed = load_fixture(fixture)
    state = MockState(alarms=seed["alarms"], views=seed["views"], fail_alarms=fail_alarms)

    app = Flask(__name__)
    app.config["MOCK_STATE"] = state

    def require_bearer(fn):
        """API routes: require the configured Bearer token."""
        @wraps(fn)
        def wrapper(*args, **kwargs):
            auth = request.headers.get("Authorization", "")
            if auth.startswith("Bearer "):
                supplied = auth.removeprefix("Bearer ").strip()
                if supplied == expected_token:
                    return fn(*args, **kwargs)
                return jsonify({"error": "invalid token"}), 403
            return jsonify({"error": "unauthorized"}), 401
        return wrapper

    @app.get("/api/alarms/active")
    @require_bearer
    def active_alarms():
        if state.fail_alarms:
            return jsonify({"error": "alarm service unavailable"}), 503
        with state.lock:
            alarms = list(state.alarms)
        return jsonify({"alarms": alarms, "generated_at": _now_iso()}), 200

    @app.post("/api/alarms")
    @require_bearer
    def add_alarm():
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or "severity" not in data:
            return jsonify({"error": "alarm must be an object with a severity"}), 400
        with state.lock:
            data.setdefault("id", str(len(state.alarms) + 1))
            state.alarms.append(data)
        logger.info("Alarm added: %s", data)
        return jsonify({"status": "ok", "id": data["id"]}), 201

    @app.delete("/api/alarms")
    @require_bearer
    def clear_alarms():
        with state.lock:
            state.alarms.clear()
        return jsonify({"status": "ok"}), 200

    @app.get("/api/views")
    @require_bearer
    def views():
        with state.lock:
            items = list(state.views)
        return jsonify({"views": items}), 200

    @app.post("/api/views")
    @require_bearer
    def add_view():
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get("id"), int):
            return jsonify({"error": "view must be an object with an integer id"}), 400
        with state.lock:
            state.views.append(data)
        return jsonify({"status": "ok", "id": data["id"]}), 201

    @app.get("/health")
    def health():
        return jsonify({"status": "ok"}), 200

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    # IMPORTANT for EXE: do NOT use debug=True in production
    create_app().run(host="0.0.0.0", port=int(os.getenv("MOCK_PORT", "8000")), debug=False)
