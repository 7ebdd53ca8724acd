"""
Shared fixtures for the Media Stream Service tests.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from media_stream_service.api.server import APIServer
from media_stream_service.core.config import Config
from media_stream_service.streaming.integration import create_streaming_module

CLIP_SIZE = 1000


def clip_bytes(size: int = CLIP_SIZE) -> bytes:
    """Deterministic, non-repeating-enough content so offsets are checkable"""
    return bytes((i * 7 + i // 256) % 256 for i in range(size))


@pytest.fixture
def media_root(tmp_path):
    root = tmp_path / "videos"
    root.mkdir()
    (root / "clip.mp4").write_bytes(clip_bytes())
    (root / "empty.mp4").write_bytes(b"")
    (root / "nested").mkdir()
    (root / "nested" / "inner.mp4").write_bytes(clip_bytes(300))
    (tmp_path / "secret.txt").write_bytes(b"outside the storage root")
    return root


@pytest.fixture
def config(tmp_path, media_root):
    cfg = Config(str(tmp_path / "does-not-exist.json"))
    cfg.storage.base_path = str(media_root)
    cfg.streaming.chunk_size_bytes = 128
    return cfg


@pytest.fixture
def streaming_module(config):
    return create_streaming_module(config)


@pytest.fixture
def streaming_service(streaming_module):
    return streaming_module.streaming_service


@pytest.fixture
def client(config, streaming_module):
    server = APIServer(config, streaming_module)
    with TestClient(server.app) as test_client:
        yield test_client


def serve_all(service, key, range_header=None):
    """Run serve() and drain the body, returning (result, body)"""

    async def _run():
        result = await service.serve(key, range_header)
        body = b"".join([chunk async for chunk in result.body])
        return result, body

    return asyncio.run(_run())


@pytest.fixture
def clip_content():
    return clip_bytes()


@pytest.fixture(name="serve_all")
def serve_all_fixture():
    return serve_all
