import httpx
import pytest

from corriere_news.exceptions import UpstreamFetchError
from corriere_news.fetcher import fetch_html


class BrokenBodyStream(httpx.AsyncByteStream):
    """Yields one chunk, then drops the connection."""

    async def __aiter__(self):
        yield b"<html>partial"
        raise httpx.ReadError("connection reset mid-body")


def _transport(handler):
    return httpx.MockTransport(handler)


class TestFetchHtml:
    @pytest.mark.asyncio
    async def test_returns_body(self):
        transport = _transport(lambda request: httpx.Response(200, text="<html>ok</html>"))

        result = await fetch_html("https://www.corriere.it", transport=transport)

        assert result == "<html>ok</html>"

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(UpstreamFetchError) as exc_info:
            await fetch_html("https://www.corriere.it", transport=_transport(handler))

        assert str(exc_info.value) == "Failed to fetch URL: connection refused"

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(UpstreamFetchError, match="^Failed to fetch URL"):
            await fetch_html("https://www.corriere.it", transport=_transport(handler))

    @pytest.mark.asyncio
    async def test_connection_lost_while_reading_body(self):
        transport = _transport(lambda request: httpx.Response(200, stream=BrokenBodyStream()))

        with pytest.raises(UpstreamFetchError) as exc_info:
            await fetch_html("https://www.corriere.it", transport=transport)

        assert str(exc_info.value) == "Failed to read response text: connection reset mid-body"

    @pytest.mark.asyncio
    async def test_bad_charset_is_decoded_leniently(self):
        transport = _transport(lambda request: httpx.Response(
            200,
            headers={"Content-Type": "text/html; charset=bogus"},
            content=b"<html>ok</html>",
        ))

        assert await fetch_html("https://www.corriere.it", transport=transport) == "<html>ok</html>"

    @pytest.mark.asyncio
    async def test_error_status_body_still_returned(self):
        transport = _transport(lambda request: httpx.Response(404, text="<html>not found</html>"))

        assert await fetch_html("https://www.corriere.it/missing", transport=transport) == "<html>not found</html>"

    @pytest.mark.asyncio
    async def test_default_headers_sent(self):
        seen = {}

        def handler(request):
            seen["user-agent"] = request.headers["user-agent"]
            return httpx.Response(200, text="")

        await fetch_html("https://www.corriere.it", transport=_transport(handler))

        assert "Mozilla" in seen["user-agent"]

    @pytest.mark.asyncio
    async def test_custom_headers(self):
        seen = {}

        def handler(request):
            seen["user-agent"] = request.headers["user-agent"]
            return httpx.Response(200, text="")

        await fetch_html("https://www.corriere.it", headers={"User-Agent": "corriere-news"}, transport=_transport(handler))

        assert seen["user-agent"] == "corriere-news"
