from pathlib import Path
import sys

import pytest
import respx

# Ensure repo root is importable (for `tools.*`, `shell`, `server`).
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tools.trello.client import API_BASE  # noqa: E402

BOARD_ID = "5f1a2b3c4d5e6f7a8b9c0d1e"
LIST_ID = "5f1a2b3c4d5e6f7a8b9c0d2f"
CARD_ID = "aaaaaaaaaaaaaaaaaaaaaaaa"
CHECKLIST_ID = "bbbbbbbbbbbbbbbbbbbbbbbb"
CHECK_ITEM_ID = "cccccccccccccccccccccccc"
MEMBER_ID = "dddddddddddddddddddddddd"


@pytest.fixture
def creds() -> dict:
    return {"apiKey": "k", "token": "t"}


@pytest.fixture
def trello_api():
    """Mocked Trello REST API; any unrouted request fails the call."""
    with respx.mock(base_url=API_BASE, assert_all_called=False) as router:
        yield router


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config file at a temp dir and clear credential env vars."""
    import config

    config_file = tmp_path / "config.json"
    monkeypatch.setattr(config, "CONFIG_FILE", config_file)
    monkeypatch.delenv(config.API_KEY_ENV, raising=False)
    monkeypatch.delenv(config.TOKEN_ENV, raising=False)
    monkeypatch.delenv(config.LOG_LEVEL_ENV, raising=False)
    return config_file
