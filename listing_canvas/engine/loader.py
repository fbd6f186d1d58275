"""Resource Loader — resolves photo/logo references to decoded images.

A reference is a remote URL, a proxy-wrapped remote URL or an inline
``data:`` URI. Every load is an ordinary coroutine returning an image or
``None``; ``load_all`` fans out with ``asyncio.gather`` and joins before
layout starts. Only the hero is allowed to fail the render.
"""

from __future__ import annotations

import asyncio
import base64
import binascii
import enum
import io
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import parse_qs, quote, unquote, urlparse

import httpx
from PIL import Image, ImageOps, UnidentifiedImageError

from listing_canvas.engine.config import RenderConfig
from listing_canvas.engine.errors import MissingRequiredPhoto, ResourceLoadFailure, short_ref

logger = logging.getLogger(__name__)

_PROXY_PATH = "/api/proxy-image"


class RefKind(str, enum.Enum):
    REMOTE = "remote"
    PROXIED = "proxied"
    EMBEDDED = "embedded"


@dataclass(frozen=True)
class PhotoRef:
    kind: RefKind
    location: str  # remote URL (proxied refs unwrapped) or the data URI itself


@dataclass(frozen=True)
class ResolvedImage:
    ref: str
    image: Image.Image
    width: int
    height: int


def parse_ref(ref: str) -> PhotoRef:
    """Classify a reference. Raises ResourceLoadFailure for unusable refs."""
    ref = (ref or "").strip()
    if not ref:
        raise ResourceLoadFailure(ref, "empty reference")

    if ref.startswith("data:"):
        return PhotoRef(RefKind.EMBEDDED, ref)

    if ref.startswith("//"):
        return PhotoRef(RefKind.REMOTE, "https:" + ref)

    try:
        parsed = urlparse(ref)
    except ValueError as e:
        raise ResourceLoadFailure(ref, f"malformed URL: {e}") from e
    if parsed.path.endswith(_PROXY_PATH):
        target = parse_qs(parsed.query).get("url", [""])[0]
        if not target:
            raise ResourceLoadFailure(ref, "proxy reference without url parameter")
        inner = target
        if inner.startswith("//"):
            inner = "https:" + inner
        return PhotoRef(RefKind.PROXIED, inner)

    if parsed.scheme in ("http", "https"):
        return PhotoRef(RefKind.REMOTE, ref)

    raise ResourceLoadFailure(ref, f"unsupported reference scheme '{parsed.scheme}'")


def decode_data_uri(uri: str) -> bytes:
    header, sep, payload = uri.partition(",")
    if not sep:
        raise ValueError("malformed data URI")
    if header.endswith(";base64"):
        try:
            return base64.b64decode(payload, validate=False)
        except binascii.Error as e:
            raise ValueError(f"bad base64 payload: {e}") from e
    return unquote(payload).encode("latin-1")


def decode_image(data: bytes) -> Image.Image:
    """Decode, apply EXIF orientation, convert to RGBA."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            oriented = ImageOps.exif_transpose(img)
            return oriented.convert("RGBA")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ValueError(f"undecodable image: {e}") from e


class ResourceLoader:
    """Fetches and decodes images for one or more renders.

    Pass an ``httpx.AsyncClient`` to share a connection pool; otherwise a
    client is opened per ``load_all`` call.
    """

    def __init__(
        self,
        config: RenderConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config or RenderConfig()
        self._client = client

    def remote_url(self, url: str) -> str:
        """Route remote fetches through the same-origin proxy when configured."""
        proxy = self.config.image_proxy_url
        if not proxy:
            return url
        return f"{proxy}?url={quote(url, safe='')}"

    async def fetch(self, ref: str, client: httpx.AsyncClient | None = None) -> ResolvedImage:
        parsed = parse_ref(ref)
        try:
            if parsed.kind is RefKind.EMBEDDED:
                data = decode_data_uri(parsed.location)
            else:
                data = await self._download(parsed.location, client or self._client)
            if len(data) > self.config.max_image_bytes:
                raise ResourceLoadFailure(ref, f"{len(data)} bytes exceeds limit")
            image = await asyncio.to_thread(decode_image, data)
        except ValueError as e:
            raise ResourceLoadFailure(ref, str(e)) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ResourceLoadFailure(ref, f"{type(e).__name__}: {e}") from e

        if image.width == 0 or image.height == 0:
            raise ResourceLoadFailure(ref, "zero-dimension image")
        return ResolvedImage(ref=ref, image=image, width=image.width, height=image.height)

    async def _download(self, url: str, client: httpx.AsyncClient | None) -> bytes:
        target = self.remote_url(url)
        if client is None:
            async with httpx.AsyncClient(follow_redirects=True) as own:
                return await self._get(own, target)
        return await self._get(client, target)

    async def _get(self, client: httpx.AsyncClient, url: str) -> bytes:
        response = await client.get(url)
        response.raise_for_status()
        return response.content

    async def load(
        self,
        ref: str,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> ResolvedImage | None:
        """Like fetch(), but failures and timeouts resolve to None."""
        timeout = self.config.resource_timeout_s if timeout is None else timeout
        try:
            return await asyncio.wait_for(self.fetch(ref, client), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning("Image load timed out after %.1fs: %s", timeout, short_ref(ref))
        except ResourceLoadFailure as e:
            logger.warning("Image load failed: %s", e)
        return None

    async def load_all(
        self,
        refs: Iterable[str | None],
        hero: str | None = None,
    ) -> dict[str, ResolvedImage]:
        """Load every distinct ref concurrently; returns only the successes.

        If ``hero`` is given it is loaded with the hero timeout and its failure
        raises MissingRequiredPhoto.
        """
        unique = list(dict.fromkeys(r for r in refs if r and r != hero))

        async def _run(client: httpx.AsyncClient | None) -> dict[str, ResolvedImage]:
            tasks = [self.load(r, client) for r in unique]
            if hero:
                tasks.append(self.load(hero, client, timeout=self.config.hero_timeout_s))
            results = await asyncio.gather(*tasks)
            loaded = {img.ref: img for img in results if img is not None}
            if hero and hero not in loaded:
                raise MissingRequiredPhoto(f"Hero photo could not be loaded: {short_ref(hero)}")
            return loaded

        needs_network = any(not r.startswith("data:") for r in [*unique, *([hero] if hero else [])])
        if self._client is not None or not needs_network:
            return await _run(self._client)
        async with httpx.AsyncClient(follow_redirects=True) as client:
            return await _run(client)
