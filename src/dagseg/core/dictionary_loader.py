"""Loading dictionary entries from files, URLs and the bundled jieba dictionary."""

import json
import logging
import re
from pathlib import Path
from typing import Any

import httpx
import jieba

from .exceptions import DictionaryFetchError, DictionaryFormatError

logger = logging.getLogger(__name__)

# jieba-js ships its dictionary as a script: var dictionary = [["word", freq], ...];
SCRIPT_DICT_PATTERN = re.compile(r"var\s+dictionary\s*=\s*(\[.*?\]);", re.DOTALL)

Entries = list[tuple[str, Any]]


def _parse_number(raw: str) -> float | int:
    try:
        return int(raw)
    except ValueError:
        return float(raw)


def _parse_script(text: str) -> Entries:
    match = SCRIPT_DICT_PATTERN.search(text)
    if not match:
        raise DictionaryFormatError("Invalid dictionary format: no 'var dictionary = [...];'")

    try:
        data = json.loads(match.group(1))
    except json.JSONDecodeError as e:
        raise DictionaryFormatError(f"Invalid dictionary array: {e}") from e

    entries: Entries = []
    for position, item in enumerate(data):
        if not isinstance(item, list) or not item:
            raise DictionaryFormatError(f"Invalid dictionary entry at index {position}: {item!r}")
        entries.append((item[0], item[1] if len(item) > 1 else None))
    return entries


def _parse_lines(text: str) -> Entries:
    entries: Entries = []
    for lineno, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line:
            continue
        parts = line.split()
        if len(parts) < 2:
            raise DictionaryFormatError(f"Missing frequency at line {lineno}: {line}")
        try:
            freq = _parse_number(parts[1])
        except ValueError:
            raise DictionaryFormatError(
                f"Invalid frequency at line {lineno}: {line}"
            ) from None
        entries.append((parts[0], freq))
    return entries


def parse_dictionary_text(text: str) -> Entries:
    """Parse dictionary text into (word, freq) pairs.

    Two formats are accepted:
    - jieba dict.txt lines: ``word freq [tag]``
    - jieba-js scripts: ``var dictionary = [["word", freq], ...];``

    Frequencies are returned as parsed; positivity is checked when the
    entries are built into a dictionary.

    Raises:
        DictionaryFormatError: If the text cannot be parsed.
    """
    text = text.lstrip("\ufeff")
    if re.search(r"var\s+dictionary\s*=", text):
        return _parse_script(text)
    return _parse_lines(text)


def load_dictionary_file(path: Path | str) -> Entries:
    """Read and parse a UTF-8 dictionary file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DictionaryFormatError(f"Dictionary file is not valid UTF-8: {path}") from e
    return parse_dictionary_text(text)


def load_bundled_dictionary() -> Entries:
    """Parse the full dictionary that ships with the jieba distribution."""
    with jieba.get_dict_file() as f:
        data = f.read()
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DictionaryFormatError("Bundled jieba dictionary is not valid UTF-8") from e
    return parse_dictionary_text(text)


class DictionaryClient:
    """Client for fetching dictionary text over HTTP."""

    DEFAULT_HEADERS = {"Accept": "text/plain, application/javascript, */*"}

    def __init__(self, timeout: float = 30.0, retries: int = 3):
        """Initialize the dictionary client.

        Args:
            timeout: Request timeout in seconds.
            retries: Number of retry attempts for failed requests.
        """
        self.timeout = timeout
        self.retries = retries
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.timeout,
                headers=self.DEFAULT_HEADERS,
                follow_redirects=True,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "DictionaryClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def fetch_text(self, url: str) -> str:
        """Fetch the body of ``url`` as text, retrying failed requests.

        Raises:
            DictionaryFetchError: If the request fails after all retries.
        """
        client = self._get_client()
        last_error: DictionaryFetchError | None = None

        for attempt in range(1, self.retries + 1):
            try:
                response = client.get(url)
                response.raise_for_status()
                return response.text
            except httpx.HTTPStatusError as e:
                last_error = DictionaryFetchError(
                    f"HTTP error {e.response.status_code} fetching {url}",
                    status_code=e.response.status_code,
                )
            except httpx.RequestError as e:
                last_error = DictionaryFetchError(f"Request failed: {e}")
            logger.debug("Attempt %d/%d for %s failed: %s", attempt, self.retries, url, last_error)

        raise last_error or DictionaryFetchError(f"Request failed after all retries: {url}")

    def fetch_dictionary(self, url: str) -> Entries:
        """Fetch and parse a remote dictionary."""
        return parse_dictionary_text(self.fetch_text(url))


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def load_entries(
    source: Path | str | None = None, timeout: float = 30.0, retries: int = 3
) -> Entries:
    """Load entries from a source.

    Args:
        source: None for the bundled jieba dictionary, an http(s) URL, or a
            local file path.
        timeout: HTTP timeout for URL sources.
        retries: HTTP retry attempts for URL sources.

    Raises:
        DictionaryFetchError: If a URL cannot be fetched.
        DictionaryFormatError: If the text cannot be parsed.
        OSError: If a local file cannot be read.
    """
    if source is None:
        logger.info("Loading bundled jieba dictionary")
        return load_bundled_dictionary()

    source_str = str(source)
    if is_url(source_str):
        logger.info("Fetching dictionary from %s", source_str)
        with DictionaryClient(timeout=timeout, retries=retries) as client:
            return client.fetch_dictionary(source_str)

    logger.info("Loading dictionary file %s", source_str)
    return load_dictionary_file(source_str)
