"""
Verification Client
===================
Signed OTP verification against one or all validation endpoints.
"""

import base64
import binascii
from typing import Dict, List, Optional, Sequence, Union
import structlog

from ..exceptions import ConfigError, ProtocolError, TransportError
from ..http import HttpFetcher, HttpxFetcher
from ..otp import OtpParser, ParsedOtp
from ..signing import generate_nonce, sign_params
from .config import VerifierConfig
from .models import VerificationResult
from .response import extract_status, is_ok, parse_response

logger = structlog.get_logger(__name__)


def decode_secret(secret_b64: Union[str, bytes]) -> bytes:
    """
    Decode a base64 API secret.

    Raises:
        ConfigError: If the secret is not valid base64
    """
    try:
        return base64.b64decode(secret_b64, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ConfigError(f"API secret is not valid base64: {e}") from e


class VerificationClient:
    """
    Client for the YubiKey OTP validation service.

    Features:
    - OTP parsing with Dvorak layout support
    - HMAC-SHA1 signed requests with a fresh nonce per round
    - Single endpoint or all-endpoints verification
    - Injectable HTTP fetcher
    """

    def __init__(
        self,
        client_id: Union[str, int],
        secret_b64: Union[str, bytes],
        fetcher: Optional[HttpFetcher] = None,
        config: Optional[VerifierConfig] = None,
    ):
        self.config = config or VerifierConfig()
        self._client_id = str(client_id)
        self._secret = decode_secret(secret_b64)
        self._owns_fetcher = fetcher is None
        if fetcher is None:
            fetcher = HttpxFetcher(
                timeout=self.config.http_timeout,
                retries=self.config.http_retries,
            )
        self.fetcher = fetcher
        self.parser = OtpParser(self.config.delimiter)
        self._endpoints: List[str] = list(self.config.endpoints)
        self._reason: Optional[str] = None

    @classmethod
    def from_config(
        cls,
        config: Optional[VerifierConfig] = None,
        fetcher: Optional[HttpFetcher] = None,
    ) -> "VerificationClient":
        """Build a client from the credentials held in ``config``."""
        config = config or VerifierConfig()
        if not config.client_id:
            raise ConfigError("No client id configured")
        return cls(config.client_id, config.secret_key, fetcher=fetcher, config=config)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.close()

    async def close(self) -> None:
        if self._owns_fetcher and isinstance(self.fetcher, HttpxFetcher):
            await self.fetcher.aclose()

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def endpoints(self) -> List[str]:
        return list(self._endpoints)

    def set_endpoints(self, urls: Sequence[str]) -> None:
        """Replace the endpoint list. URLs are not validated here."""
        self._endpoints = list(urls)

    @property
    def reason(self) -> Optional[str]:
        """
        Status of the most recent round on this client.

        Shared by every caller of this instance; prefer the ``reason`` of
        the result returned by ``verify``.
        """
        return self._reason

    def build_params(self, parsed: ParsedOtp) -> Dict[str, str]:
        """Request parameters for one round, with a fresh nonce."""
        return {
            "id": self._client_id,
            "otp": parsed.otp,
            "nonce": generate_nonce(),
            "timestamp": str(int(self.config.request_timestamp)),
            "sl": str(self.config.sync_level),
            "timeout": str(self.config.server_timeout),
        }

    def build_url(self, endpoint: str, params: Dict[str, str]) -> str:
        return f"{endpoint}?{sign_params(params, self._secret)}"

    async def verify(self, otp: str, multiple: bool = False) -> VerificationResult:
        """
        Verify a One-Time Password.

        With ``multiple`` every configured endpoint is asked in turn and
        the OTP is accepted only if all of them accept it. The first
        rejection ends the check.

        Args:
            otp: OTP string from the token, optionally password prefixed
            multiple: Check the OTP against all endpoints

        Returns:
            VerificationResult of the last round issued

        Raises:
            OtpParseError: If the OTP is malformed
            ConfigError: If no endpoints are configured
            TransportError: If an endpoint could not be reached
            ProtocolError: If a response carries no status
        """
        parsed = self.parser.parse(otp)

        if not self._endpoints:
            raise ConfigError("No validation endpoints configured")

        targets = self._endpoints if multiple else self._endpoints[:1]
        result = None
        for endpoint in targets:
            result = await self.verify_round(parsed, endpoint)
            if not result.success:
                return result

        return result

    async def verify_round(self, parsed: ParsedOtp, endpoint: str) -> VerificationResult:
        """Run one signed verification request against ``endpoint``."""
        params = self.build_params(parsed)
        url = self.build_url(endpoint, params)

        logger.debug(
            "Sending verification request",
            endpoint=endpoint,
            public_id=parsed.public_id,
        )

        try:
            response = await self.fetcher.get(url)
        except TransportError as e:
            logger.error("Validation request failed", endpoint=endpoint, error=str(e))
            raise
        except Exception as e:
            logger.error("Validation request failed", endpoint=endpoint, error=str(e))
            raise TransportError(f"Fetch failed: {e}", endpoint=endpoint) from e

        body = response.text
        data = parse_response(body)
        try:
            status = extract_status(data, endpoint=endpoint, body=body)
        except ProtocolError:
            logger.error("Validation response without status", endpoint=endpoint)
            raise

        self._reason = status
        success = is_ok(status)

        if success:
            logger.info("OTP verified", endpoint=endpoint, public_id=parsed.public_id)
        else:
            logger.warning(
                "OTP rejected",
                endpoint=endpoint,
                public_id=parsed.public_id,
                status=status,
            )

        return VerificationResult(
            success=success,
            reason=status,
            endpoint=endpoint,
            response=data,
        )
