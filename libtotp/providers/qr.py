from __future__ import annotations

import abc
import io
import re
from typing import Protocol, runtime_checkable
from urllib.parse import quote, urlsplit

import qrcode
import qrcode.constants
import requests
from qrcode.image.pure import PyPNGImage
from qrcode.image.svg import SvgPathImage

from libtotp._logging import logger
from libtotp.exc import QRCodeError

_color_re = re.compile("[0-9a-fA-F]{6}")

__all__ = [
    "QrImageEncoder",
    "BaseHTTPQRCodeProvider",
    "GoogleQRCodeProvider",
    "QRServerProvider",
    "QRicketProvider",
    "LocalQRCodeProvider",
]


@runtime_checkable
class QrImageEncoder(Protocol):
    def render(self, text: str, size: int) -> tuple[bytes, str]:
        """render **text** as QR code of **size** pixels, returns ``(image, mime_type)``."""
        ...


def _lookup_mime_type(value: str, mime_types: dict[str, str]) -> str:
    try:
        return mime_types[value.lower()]
    except KeyError:
        msg = f"Unknown MIME-type: {value}"
        raise QRCodeError(msg) from None


class BaseHTTPQRCodeProvider(abc.ABC):
    """
    base class for providers which download the QR code image from a web api.

    .. warning::

        the otpauth uri, which contains the secret, is sent to a third party.
        prefer :class:`LocalQRCodeProvider` unless this is acceptable.
    """

    USER_AGENT = "libtotp"

    def __init__(self, verify_ssl: bool = True, timeout: float = 10.0) -> None:
        if not isinstance(verify_ssl, bool):
            msg = "verify_ssl must be bool"
            raise QRCodeError(msg)
        self.verify_ssl = verify_ssl
        self.timeout = timeout

    @property
    @abc.abstractmethod
    def mime_type(self) -> str:
        raise NotImplementedError

    @abc.abstractmethod
    def get_url(self, text: str, size: int) -> str:
        raise NotImplementedError

    def render(self, text: str, size: int) -> tuple[bytes, str]:
        return self._get_content(self.get_url(text, size)), self.mime_type

    def _get_content(self, url: str) -> bytes:
        # url contains the secret, only log the host
        host = urlsplit(url).netloc
        logger.debug("requesting qrcode image from %s", host)
        try:
            response = requests.get(
                url,
                headers={"User-Agent": self.USER_AGENT},
                timeout=self.timeout,
                verify=self.verify_ssl,
            )
            response.raise_for_status()
        except requests.RequestException as err:
            msg = f"Unable to retrieve qrcode image from {host}"
            raise QRCodeError(msg) from err
        return response.content


class GoogleQRCodeProvider(BaseHTTPQRCodeProvider):
    """https://developers.google.com/chart/infographics/docs/qr_codes"""

    def __init__(
        self,
        verify_ssl: bool = True,
        error_correction_level: str = "L",
        margin: int = 1,
        timeout: float = 10.0,
    ) -> None:
        super().__init__(verify_ssl=verify_ssl, timeout=timeout)
        self.error_correction_level = error_correction_level
        self.margin = margin

    @property
    def mime_type(self) -> str:
        return "image/png"

    def get_url(self, text: str, size: int) -> str:
        return (
            "https://chart.googleapis.com/chart?cht=qr"
            f"&chs={size}x{size}"
            f"&chld={self.error_correction_level}|{self.margin}"
            f"&chl={quote(text, safe='')}"
        )


class QRServerProvider(BaseHTTPQRCodeProvider):
    """http://goqr.me/api/doc/create-qr-code/"""

    MIME_TYPES = {
        "png": "image/png",
        "gif": "image/gif",
        "jpg": "image/jpeg",
        "jpeg": "image/jpeg",
        "svg": "image/svg+xml",
        "eps": "application/postscript",
    }

    def __init__(
        self,
        verify_ssl: bool = True,
        error_correction_level: str = "L",
        margin: int = 4,
        qzone: int = 1,
        bgcolor: str = "ffffff",
        color: str = "000000",
        format: str = "png",
        timeout: float = 10.0,
    ) -> None:
        super().__init__(verify_ssl=verify_ssl, timeout=timeout)
        self.error_correction_level = error_correction_level
        self.margin = margin
        self.qzone = qzone
        self.bgcolor = bgcolor
        self.color = color
        self.format = format
        self._mime_type = _lookup_mime_type(format, self.MIME_TYPES)

    @property
    def mime_type(self) -> str:
        return self._mime_type

    @staticmethod
    def _decode_color(value: str) -> str:
        """convert hex color to the api's decimal format, e.g. ``ff8000`` -> ``255-128-0``"""
        if not _color_re.fullmatch(value):
            msg = f"Invalid color: {value!r}"
            raise QRCodeError(msg)
        return "-".join(str(int(value[idx : idx + 2], 16)) for idx in (0, 2, 4))

    def get_url(self, text: str, size: int) -> str:
        return (
            "https://api.qrserver.com/v1/create-qr-code/"
            f"?size={size}x{size}"
            f"&ecc={self.error_correction_level.upper()}"
            f"&margin={self.margin}"
            f"&qzone={self.qzone}"
            f"&bgcolor={self._decode_color(self.bgcolor)}"
            f"&color={self._decode_color(self.color)}"
            f"&format={self.format.lower()}"
            f"&data={quote(text, safe='')}"
        )


class QRicketProvider(BaseHTTPQRCodeProvider):
    """http://qrickit.com/qrickit_apps/qrickit_api.php"""

    MIME_TYPES = {
        "p": "image/png",
        "g": "image/gif",
        "j": "image/jpeg",
    }

    def __init__(
        self,
        error_correction_level: str = "L",
        bgcolor: str = "ffffff",
        color: str = "000000",
        format: str = "p",
        timeout: float = 10.0,
    ) -> None:
        # api is only served over plain http
        super().__init__(verify_ssl=False, timeout=timeout)
        self.error_correction_level = error_correction_level
        self.bgcolor = bgcolor
        self.color = color
        self.format = format
        self._mime_type = _lookup_mime_type(format, self.MIME_TYPES)

    @property
    def mime_type(self) -> str:
        return self._mime_type

    def get_url(self, text: str, size: int) -> str:
        return (
            "http://qrickit.com/api/qr"
            f"?qrsize={size}"
            f"&e={self.error_correction_level.lower()}"
            f"&bgdcolor={self.bgcolor}"
            f"&fgdcolor={self.color}"
            f"&t={self.format.lower()}"
            f"&d={quote(text, safe='')}"
        )


class LocalQRCodeProvider:
    """
    renders QR codes locally using the :mod:`qrcode` package;
    the secret never leaves the process.

    :param error_correction_level: one of ``"L"``, ``"M"``, ``"Q"``, ``"H"``.
    :param border: width of the quiet zone, in modules.
    :param format: ``"png"`` or ``"svg"``.
    """

    ERROR_CORRECTION_LEVELS = {
        "L": qrcode.constants.ERROR_CORRECT_L,
        "M": qrcode.constants.ERROR_CORRECT_M,
        "Q": qrcode.constants.ERROR_CORRECT_Q,
        "H": qrcode.constants.ERROR_CORRECT_H,
    }

    IMAGE_FORMATS = {
        "png": (PyPNGImage, "image/png"),
        "svg": (SvgPathImage, "image/svg+xml"),
    }

    def __init__(
        self,
        error_correction_level: str = "H",
        border: int = 4,
        format: str = "png",
    ) -> None:
        try:
            self._error_correction = self.ERROR_CORRECTION_LEVELS[
                error_correction_level.upper()
            ]
        except KeyError:
            msg = f"Unknown error correction level: {error_correction_level}"
            raise QRCodeError(msg) from None
        try:
            self._image_factory, self.mime_type = self.IMAGE_FORMATS[format.lower()]
        except KeyError:
            msg = f"Unknown MIME-type: {format}"
            raise QRCodeError(msg) from None
        self.border = border

    def render(self, text: str, size: int) -> tuple[bytes, str]:
        code = qrcode.QRCode(
            error_correction=self._error_correction,
            border=self.border,
            image_factory=self._image_factory,
        )
        code.add_data(text)
        try:
            code.make(fit=True)
        except ValueError as err:
            # DataOverflowError, or "Invalid version" past version 40
            msg = f"Unable to render qrcode: text too long ({len(text)} chars)"
            raise QRCodeError(msg) from err
        # largest box size that fits the requested image size
        code.box_size = max(1, size // (code.modules_count + 2 * self.border))

        buffer = io.BytesIO()
        code.make_image().save(buffer)
        return buffer.getvalue(), self.mime_type
