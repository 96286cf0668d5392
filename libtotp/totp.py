"""libtotp.totp -- TOTP / RFC 6238 generation, verification & provisioning"""

from __future__ import annotations

import base64
from typing import TYPE_CHECKING
from urllib.parse import quote

from libtotp._utils.base32 import b32decode
from libtotp._utils.bytes import consteq
from libtotp.config import TOTPConfig
from libtotp.exc import ClockSkewError
from libtotp.hotp import compute_code
from libtotp.providers.qr import LocalQRCodeProvider
from libtotp.providers.rng import CSRNGProvider
from libtotp.providers.time import (
    ClockSource,
    HttpTimeProvider,
    LocalMachineTimeProvider,
)
from libtotp.secret import create_secret

if TYPE_CHECKING:
    from collections.abc import Iterable

    from libtotp.providers.qr import QrImageEncoder
    from libtotp.providers.rng import RandomByteSource

__all__ = ["TwoFactorAuth"]


class TwoFactorAuth:
    """
    Front-end for creating secrets, and generating / verifying TOTP codes.

    Usage example::

        >>> from libtotp import TwoFactorAuth
        >>> tfa = TwoFactorAuth("MyApp")
        >>> secret = tfa.create_secret(160)
        >>> uri = tfa.get_qrcode_image_as_data_uri("alice@example.org", secret)
        >>> tfa.verify_code(secret, tfa.get_code(secret))
        True

    :param issuer:
        name of the service, shown by authenticator apps next to the label.

    :param digits:
        number of digits in generated codes. Defaults to ``6``.

    :param period:
        lifetime of a code, in seconds. Defaults to ``30``.

    :param algorithm:
        hash algorithm for the HMAC; ``"sha1"`` (the default), ``"sha256"``,
        ``"sha512"`` or ``"md5"`` (compatibility only).

    :param qrcode_provider:
        :class:`~libtotp.providers.qr.QrImageEncoder`,
        defaults to :class:`~libtotp.providers.qr.LocalQRCodeProvider`.

    :param rng_provider:
        :class:`~libtotp.providers.rng.RandomByteSource` used by :meth:`create_secret`,
        defaults to :class:`~libtotp.providers.rng.CSRNGProvider`.

    :param time_provider:
        :class:`~libtotp.providers.time.ClockSource` used when no time is passed,
        defaults to :class:`~libtotp.providers.time.LocalMachineTimeProvider`.

    :raises ConfigurationError:
        if digits, period or algorithm are invalid.
    """

    def __init__(
        self,
        issuer: str | None = None,
        digits: int = 6,
        period: int = 30,
        algorithm: str = "sha1",
        qrcode_provider: QrImageEncoder | None = None,
        rng_provider: RandomByteSource | None = None,
        time_provider: ClockSource | None = None,
    ) -> None:
        self.issuer = issuer
        self.config = TOTPConfig(digits=digits, period=period, algorithm=algorithm)
        self.qrcode_provider = (
            LocalQRCodeProvider() if qrcode_provider is None else qrcode_provider
        )
        self.rng_provider = CSRNGProvider() if rng_provider is None else rng_provider
        self.time_provider = (
            LocalMachineTimeProvider() if time_provider is None else time_provider
        )

    @property
    def digits(self) -> int:
        return self.config.digits

    @property
    def period(self) -> int:
        return self.config.period

    @property
    def algorithm(self) -> str:
        return self.config.algorithm

    # =========================================================================
    # secrets
    # =========================================================================
    def create_secret(self, bits: int = 80, require_crypto_secure: bool = True) -> str:
        """
        create new base32 secret using the configured rng provider.

        80 bits is the default for compatibility with existing deployments;
        RFC 4226 recommends 160 bits or more.

        :raises InsecureRandomSourceError:
            if **require_crypto_secure** is set, but the rng provider isn't secure.
        """
        return create_secret(
            self.rng_provider,
            bits=bits,
            require_crypto_secure=require_crypto_secure,
        )

    # =========================================================================
    # codes
    # =========================================================================
    def get_code(self, secret: str, time: float | None = None) -> str:
        """
        calculate code for base32 **secret** at **time**
        (unix seconds, defaults to the time provider's current time).

        :raises InvalidEncodingError: if secret isn't valid base32.
        """
        counter = self._time_to_counter(self._get_time(time))
        return self._generate(b32decode(secret), counter)

    def verify_code(
        self,
        secret: str,
        code: str,
        discrepancy: int = 0,
        time: float | None = None,
    ) -> bool:
        """
        check **code** against **secret**, accepting codes from
        ``discrepancy * period`` seconds before until ``discrepancy * period``
        seconds after **time**.

        every code in the window is generated & compared, even after a match,
        so that timing doesn't reveal which step matched.

        :raises InvalidEncodingError: if secret isn't valid base32.
        """
        if discrepancy < 0:
            msg = "discrepancy must be >= 0"
            raise ValueError(msg)
        key = b32decode(secret)
        counter = self._time_to_counter(self._get_time(time))

        matched = False
        for offset in range(-discrepancy, discrepancy + 1):
            candidate = counter + offset
            if candidate < 0:
                # before the epoch, nothing to match
                continue
            matched |= consteq(self._generate(key, candidate), code)
        return matched

    def _generate(self, key: bytes, counter: int) -> str:
        return compute_code(
            key, counter, digits=self.digits, algorithm=self.algorithm
        )

    def _get_time(self, time: float | None) -> float:
        if time is None:
            return self.time_provider.now()
        return time

    def _time_to_counter(self, time: float) -> int:
        return int(time // self.period)

    # =========================================================================
    # provisioning
    # =========================================================================
    def get_qr_text(self, label: str, secret: str) -> str:
        """
        build ``otpauth://totp/...`` uri for authenticator apps,
        see https://github.com/google/google-authenticator/wiki/Key-Uri-Format.
        """
        # NOTE: not using urlencode() since it encodes ' ' as '+'
        params = [
            ("secret", secret),
            ("issuer", self.issuer or ""),
            ("period", str(self.period)),
            ("algorithm", self.algorithm.upper()),
            ("digits", str(self.digits)),
        ]
        query = "&".join(f"{key}={quote(value, safe='')}" for key, value in params)
        return f"otpauth://totp/{quote(label, safe='')}?{query}"

    def get_qrcode_image_as_data_uri(
        self, label: str, secret: str, size: int = 200
    ) -> str:
        """render :meth:`get_qr_text` as QR code image, returned as ``data:`` uri."""
        if size <= 0:
            msg = "Size must be int > 0"
            raise ValueError(msg)
        image, mime_type = self.qrcode_provider.render(
            self.get_qr_text(label, secret), size
        )
        return f"data:{mime_type};base64,{base64.b64encode(image).decode('ascii')}"

    # =========================================================================
    # diagnostics
    # =========================================================================
    def ensure_correct_time(
        self,
        time_providers: Iterable[ClockSource] | None = None,
        leniency: int = 5,
    ) -> None:
        """
        compare the time provider against each of **time_providers**
        (defaults to a single :class:`~libtotp.providers.time.HttpTimeProvider`).

        :raises ClockSkewError:
            if the times differ by more than **leniency** seconds.
        :raises ClockUnavailableError:
            if a time provider fails.
        """
        if time_providers is None:
            time_providers = [HttpTimeProvider()]

        for provider in time_providers:
            if not isinstance(provider, ClockSource):
                msg = f"{type(provider).__name__} does not implement ClockSource"
                raise TypeError(msg)
            local_time = self.time_provider.now()
            reference_time = provider.now()
            if abs(local_time - reference_time) > leniency:
                msg = (
                    f"Time for time provider is off by more than {leniency} seconds "
                    f"when compared to {type(provider).__name__} - {reference_time} "
                    f"and {type(self.time_provider).__name__} {local_time}"
                )
                raise ClockSkewError(msg)
