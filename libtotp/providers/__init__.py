from libtotp.providers.qr import (
    BaseHTTPQRCodeProvider,
    GoogleQRCodeProvider,
    LocalQRCodeProvider,
    QRicketProvider,
    QrImageEncoder,
    QRServerProvider,
)
from libtotp.providers.rng import CSRNGProvider, HashRNGProvider, RandomByteSource
from libtotp.providers.time import (
    ClockSource,
    HttpTimeProvider,
    LocalMachineTimeProvider,
)

__all__ = [
    "BaseHTTPQRCodeProvider",
    "CSRNGProvider",
    "ClockSource",
    "GoogleQRCodeProvider",
    "HashRNGProvider",
    "HttpTimeProvider",
    "LocalMachineTimeProvider",
    "LocalQRCodeProvider",
    "QRServerProvider",
    "QRicketProvider",
    "QrImageEncoder",
    "RandomByteSource",
]
