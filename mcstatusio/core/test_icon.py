import io
import pytest
from PIL import Image

from mcstatusio.stub_transport import StubTransport
from mcstatusio.core.icon import IconClient, icon_url, fetch_icon, get_icon, decode_icon
from mcstatusio.core.status import JavaStatus
from mcstatusio.core.config_types import ClientConfig
from mcstatusio.core.exceptions import IconDecodeError, RemoteError, TransportError

def make_png(size=(64, 64), color=(255, 0, 0, 255)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGBA", size, color).save(buffer, format="PNG")
    return buffer.getvalue()

def test_icon_url_literal():
    assert icon_url("example.com") == "https://api.mcstatus.io/v2/icon/example.com?timeout=5.0"

def test_icon_url_custom_timeout_and_base():
    config = ClientConfig(api_base="https://mirror.example.org/v2/")
    assert icon_url("example.com:25566", 1, config) == "https://mirror.example.org/v2/icon/example.com:25566?timeout=1.0"

def test_icon_url_escapes_address():
    assert icon_url("evil.com/../x?y") == "https://api.mcstatus.io/v2/icon/evil.com%2F..%2Fx%3Fy?timeout=5.0"

@pytest.mark.asyncio
async def test_fetch_icon_decodes_png():
    transport = StubTransport(body=make_png(), content_type="image/png")
    result = await fetch_icon("example.com", transport=transport)

    assert result.ok
    assert result.value.size == (64, 64)
    assert transport.requests[0][0] == "https://api.mcstatus.io/v2/icon/example.com?timeout=5.0"

@pytest.mark.asyncio
async def test_fetch_icon_garbage_is_decode_error():
    result = await fetch_icon("example.com", transport=StubTransport(body=b"not an image", content_type="image/png"))

    assert isinstance(result.error, IconDecodeError)

@pytest.mark.asyncio
async def test_fetch_icon_remote_error():
    result = await fetch_icon("example.com", transport=StubTransport(status=500, body=b""))

    assert isinstance(result.error, RemoteError)
    assert result.error.status_code == 500

@pytest.mark.asyncio
async def test_fetch_icon_transport_error():
    result = await fetch_icon("example.com", transport=StubTransport(error=TransportError("connection refused")))

    assert isinstance(result.error, TransportError)

def test_get_icon_blocking():
    result = get_icon("example.com", transport=StubTransport(body=make_png((32, 32))))

    assert result.unwrap().size == (32, 32)

def test_icon_client():
    transport = StubTransport(body=make_png())
    client = IconClient(transport=transport)

    assert client.url("example.com", 2.0) == "https://api.mcstatus.io/v2/icon/example.com?timeout=2.0"
    assert client.get("example.com").ok
    assert len(transport.requests) == 1

def test_decode_icon_rejects_empty():
    with pytest.raises(IconDecodeError):
        decode_icon(b"")

def test_java_status_icon_image(online_java):
    import base64
    online_java["icon"] = "data:image/png;base64," + base64.b64encode(make_png((16, 16))).decode()

    image = JavaStatus(online_java).icon_image()
    assert image.size == (16, 16)
