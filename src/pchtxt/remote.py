"""Fetch the upstream copy of a Patch Text named by its ``@url`` tag."""

from __future__ import annotations

import io
import logging

import httpx
from pydantic import BaseModel

from pchtxt.exceptions import RemoteFetchError
from pchtxt.meta import extract_meta
from pchtxt.models.patch import Meta
from pchtxt.text import fold

logger = logging.getLogger(__name__)

_HEADERS = {"User-Agent": "pchtxt", "Accept": "text/plain, */*"}


class UpdateCheck(BaseModel):
    """Result of comparing a local Patch Text with its ``@url`` source."""

    url: str
    local_meta: Meta
    remote_meta: Meta
    remote_text: str
    same_program: bool
    changed: bool

    @property
    def update_available(self) -> bool:
        return self.same_program and self.changed


def _get(client: httpx.Client, url: str) -> str:
    try:
        response = client.get(url, headers=_HEADERS)
    except httpx.HTTPError as exc:
        raise RemoteFetchError(f"failed to fetch {url}: {exc}", url=url) from exc
    if response.status_code != 200:
        raise RemoteFetchError(
            f"fetching {url} returned HTTP {response.status_code}",
            url=url,
            status_code=response.status_code,
        )
    return response.text


def fetch_remote_text(url: str, *, client: httpx.Client | None = None, timeout: float = 10.0) -> str:
    """Download the Patch Text at *url*.

    Raises:
        RemoteFetchError: On transport errors or a non-200 response.
    """
    if not url:
        raise RemoteFetchError("no url to fetch", url=url)
    logger.debug("fetching %s", url)
    if client is not None:
        return _get(client, url)
    with httpx.Client(timeout=timeout, follow_redirects=True) as owned_client:
        return _get(owned_client, url)


def _normalize(text: str) -> str:
    return text.replace("\r\n", "\n").rstrip("\n")


def _same_program(local: Meta, remote: Meta) -> bool:
    if not local.program_id or not remote.program_id:
        return True
    return fold(local.program_id) == fold(remote.program_id)


def check_for_update(local_text: str, *, client: httpx.Client | None = None, timeout: float = 10.0) -> UpdateCheck:
    """Compare *local_text* with the file its ``@url`` tag points to.

    A missing program id on either side is not treated as a mismatch.

    Raises:
        RemoteFetchError: If the text has no ``@url`` tag or the download fails.
    """
    local_meta = extract_meta(io.StringIO(local_text))
    if not local_meta.url:
        raise RemoteFetchError("Patch Text has no @url tag", url="")

    remote_text = fetch_remote_text(local_meta.url, client=client, timeout=timeout)
    remote_meta = extract_meta(io.StringIO(remote_text))
    return UpdateCheck(
        url=local_meta.url,
        local_meta=local_meta,
        remote_meta=remote_meta,
        remote_text=remote_text,
        same_program=_same_program(local_meta, remote_meta),
        changed=_normalize(local_text) != _normalize(remote_text),
    )
