"""
Unit Tests for the httpx Fetcher
================================
"""

import httpx
import pytest


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestHttpxFetcher:
    """Tests for transport error mapping and retries."""

    @pytest.mark.asyncio
    async def test_get_returns_body(self):
        """Should return the response with its text body."""
        from yubikey_verify.http import HttpxFetcher

        def handler(request):
            assert request.url.params["id"] == "1"
            return httpx.Response(200, text="status=OK\r\n")

        async with HttpxFetcher(client=mock_client(handler)) as fetcher:
            response = await fetcher.get("https://api.example.test/verify?id=1")

        assert response.text == "status=OK\r\n"

    @pytest.mark.asyncio
    async def test_server_error_mapped(self):
        """5xx responses should raise TransportError."""
        from yubikey_verify.http import HttpxFetcher
        from yubikey_verify.exceptions import TransportError

        fetcher = HttpxFetcher(client=mock_client(lambda request: httpx.Response(503)))

        with pytest.raises(TransportError) as exc_info:
            await fetcher.get("https://api.example.test/verify?id=1")

        assert exc_info.value.status_code == 503
        assert exc_info.value.endpoint == "https://api.example.test/verify"

    @pytest.mark.asyncio
    async def test_connect_error_mapped(self):
        """Connection failures should raise TransportError."""
        from yubikey_verify.http import HttpxFetcher
        from yubikey_verify.exceptions import TransportError

        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        fetcher = HttpxFetcher(client=mock_client(handler))

        with pytest.raises(TransportError):
            await fetcher.get("https://api.example.test/verify")

    @pytest.mark.asyncio
    async def test_timeout_mapped(self):
        """Timeouts should raise TransportTimeoutError."""
        from yubikey_verify.http import HttpxFetcher
        from yubikey_verify.exceptions import TransportTimeoutError

        def handler(request):
            raise httpx.ReadTimeout("too slow", request=request)

        fetcher = HttpxFetcher(client=mock_client(handler))

        with pytest.raises(TransportTimeoutError):
            await fetcher.get("https://api.example.test/verify")

    @pytest.mark.asyncio
    async def test_retries_transport_failures(self):
        """Should retry up to the configured attempts."""
        from yubikey_verify.http import HttpxFetcher

        calls = 0

        def handler(request):
            nonlocal calls
            calls += 1
            if calls == 1:
                return httpx.Response(500)
            return httpx.Response(200, text="status=OK\n")

        fetcher = HttpxFetcher(retries=2, client=mock_client(handler))
        response = await fetcher.get("https://api.example.test/verify")

        assert response.text == "status=OK\n"
        assert calls == 2

    @pytest.mark.asyncio
    async def test_no_retry_by_default(self):
        """A single attempt unless retries are configured."""
        from yubikey_verify.http import HttpxFetcher
        from yubikey_verify.exceptions import TransportError

        calls = 0

        def handler(request):
            nonlocal calls
            calls += 1
            return httpx.Response(500)

        fetcher = HttpxFetcher(client=mock_client(handler))

        with pytest.raises(TransportError):
            await fetcher.get("https://api.example.test/verify")
        assert calls == 1

    @pytest.mark.asyncio
    async def test_client_errors_not_retried(self):
        """4xx responses should fail on the first attempt."""
        from yubikey_verify.http import HttpxFetcher
        from yubikey_verify.exceptions import TransportError

        calls = 0

        def handler(request):
            nonlocal calls
            calls += 1
            return httpx.Response(400)

        fetcher = HttpxFetcher(retries=3, client=mock_client(handler))

        with pytest.raises(TransportError) as exc_info:
            await fetcher.get("https://api.example.test/verify")
        assert exc_info.value.status_code == 400
        assert calls == 1

    @pytest.mark.asyncio
    async def test_encoded_signature_preserved(self):
        """A percent-encoded plus in h should reach the server unchanged."""
        from yubikey_verify.http import HttpxFetcher

        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, text="status=OK\n")

        fetcher = HttpxFetcher(client=mock_client(handler))
        await fetcher.get("https://api.example.test/verify?id=1&h=ab%2Bcd/e=")

        assert seen[0].endswith("&h=ab%2Bcd/e=")

    def test_satisfies_fetcher_protocol(self):
        """HttpxFetcher should be usable wherever an HttpFetcher is expected."""
        from yubikey_verify.http import HttpFetcher, HttpxFetcher

        assert isinstance(HttpxFetcher(), HttpFetcher)

    @pytest.mark.asyncio
    async def test_client_verifies_over_httpx(self):
        """End to end through the httpx fetcher."""
        from yubikey_verify.client import VerificationClient
        from yubikey_verify.signing import compute_signature

        seen = []
        urls = []

        def handler(request):
            seen.append(request.url.host)
            urls.append(str(request.url))
            return httpx.Response(200, text="otp=x\nstatus=OK\n")

        fetcher = mock_fetcher(handler)
        async with VerificationClient(1, "c2VjcmV0", fetcher=fetcher) as client:
            result = await client.verify("ccccccbdefghcbdefghcbdefghcbdefgh")

        assert result.success is True
        assert seen == ["api.yubico.com"]

        unsigned, signature = urls[0].split("?", 1)[1].split("&h=")
        assert signature == compute_signature(b"secret", unsigned)


def mock_fetcher(handler):
    from yubikey_verify.http import HttpxFetcher

    return HttpxFetcher(client=mock_client(handler))
