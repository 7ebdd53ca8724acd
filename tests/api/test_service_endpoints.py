"""
Tests for the service-level endpoints and application wiring.
"""

from fastapi.testclient import TestClient

from media_stream_service.api.server import APIServer
from media_stream_service.streaming.integration import create_streaming_module


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Media Stream Service API"}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_system_status(client, media_root):
    response = client.get("/system/status")
    assert response.status_code == 200

    streaming = response.json()["streaming"]
    assert streaming["media_storage"] == "FileSystemMediaStorage"
    assert streaming["storage_root"] == str(media_root.resolve())
    assert streaming["route_prefix"] == "/api/videos"
    assert streaming["internal_errors"] == 0


def test_custom_route_prefix_and_content_type(config, clip_content):
    config.streaming.route_prefix = "/media"
    config.streaming.content_type = "video/webm"
    server = APIServer(config, create_streaming_module(config))

    with TestClient(server.app) as client:
        response = client.get("/media/clip.mp4", headers={"Range": "bytes=0-9"})
        assert response.status_code == 206
        assert response.headers["content-type"] == "video/webm"
        assert response.content == clip_content[:10]

        assert client.get("/api/videos/clip.mp4").status_code == 404


def test_stop_without_running_server_is_a_no_op(config, streaming_module):
    server = APIServer(config, streaming_module)
    server.stop()
