"""Shared fixtures for dagseg tests."""

from pathlib import Path
import pytest

import dagseg.core.config as config_module
from dagseg.core.models import DEFAULT_ENTRIES
from dagseg.core.segmenter import Segmenter


@pytest.fixture(autouse=True)
def _clear_proxy_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure environment proxies don't affect HTTP client tests."""
    proxy_vars = (
        "HTTP_PROXY",
        "HTTPS_PROXY",
        "ALL_PROXY",
        "NO_PROXY",
        "http_proxy",
        "https_proxy",
        "all_proxy",
        "no_proxy",
    )
    for var in proxy_vars:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _reset_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test with no dictionary source configured."""
    for var in (
        "DAGSEG_DICT_PATH",
        "DAGSEG_DICT_URL",
        "DAGSEG_HTTP_TIMEOUT",
        "DAGSEG_HTTP_RETRIES",
        "DAGSEG_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    config_module._settings = None
    yield
    config_module._settings = None


@pytest.fixture
def segmenter() -> Segmenter:
    """Segmenter on the bundled default word list."""
    return Segmenter()


@pytest.fixture
def greeting_segmenter() -> Segmenter:
    """Default word list plus 你好."""
    return Segmenter(entries=DEFAULT_ENTRIES + [("你好", 1)])


@pytest.fixture
def dict_file(tmp_path: Path) -> Path:
    """A small dictionary in jieba dict.txt format."""
    path = tmp_path / "dict.txt"
    path.write_text(
        "北京 10 ns\n"
        "北京大学 5 nt\n"
        "大学 8 n\n"
        "我 20 r\n"
        "爱 6 v\n"
        "天安门 4 ns\n"
        "\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def script_dict_file(tmp_path: Path) -> Path:
    """A small dictionary in jieba-js script format."""
    path = tmp_path / "dictionary.js"
    path.write_text(
        'var dictionary = [["北京", 3], ["天安门", 2], ["我", 1]];\n',
        encoding="utf-8",
    )
    return path


@pytest.fixture
def gbk_dict_file(tmp_path: Path) -> Path:
    """A dictionary file saved as GBK instead of UTF-8."""
    path = tmp_path / "gbk.txt"
    path.write_bytes("北京 3\n大学 2\n".encode("gbk"))
    return path
