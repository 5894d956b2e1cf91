from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


class FakeSessionCreator:
    def __init__(self, result=None) -> None:
        self.result = result if result is not None else {"success": "true", "id": "sess-1"}
        self.calls: list[tuple[str, object]] = []

    def create_session(self, api_token, parameters):
        self.calls.append((api_token, parameters))
        return self.result


@pytest.fixture()
def session_creator() -> FakeSessionCreator:
    return FakeSessionCreator()


@pytest.fixture(scope="session")
def app():
    os.environ["TROPO_API_TOKEN"] = "test-token"
    os.environ.pop("PUBLIC_BASE_URL", None)

    import importlib

    # Ensure clean import with the test settings.
    for module_name in [
        "config.settings",
        "integrations.tropo_client",
        "api.dependencies",
        "api.links",
        "api.tropo_routes",
        "main",
    ]:
        sys.modules.pop(module_name, None)

    main = importlib.import_module("main")
    return main.app
