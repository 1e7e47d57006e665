"""HTTP client setup and saving downloaded files."""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

import httpx

from econskills.constants import DEFAULT_TIMEOUT


@asynccontextmanager
async def open_client(
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    Async context manager yielding the HTTP client shared by one download.

    Args:
        timeout: Per-request timeout in seconds
        transport: Optional transport override (used by tests)

    Yields:
        An httpx.AsyncClient that follows redirects
    """
    async with httpx.AsyncClient(
        follow_redirects=True, timeout=timeout, transport=transport
    ) as client:
        yield client


def save_download(output_dir: Path, filename: str, data: bytes | str) -> Path:
    """Write a downloaded file into output_dir, creating it if needed.

    Returns:
        Path to the written file

    Raises:
        OSError: If the directory or file cannot be written
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    target = output_dir / filename
    if isinstance(data, bytes):
        target.write_bytes(data)
    else:
        target.write_text(data, encoding="utf-8")
    return target
