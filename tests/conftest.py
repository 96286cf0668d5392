import pytest

from libtotp import TwoFactorAuth
from tests.utils import EchoQRProvider, FixedTimeProvider, SequentialRNGProvider


@pytest.fixture
def insecure_rng() -> SequentialRNGProvider:
    return SequentialRNGProvider(secure=False)


@pytest.fixture
def secure_rng() -> SequentialRNGProvider:
    return SequentialRNGProvider(secure=True)


@pytest.fixture
def tfa() -> TwoFactorAuth:
    return TwoFactorAuth(
        "Test",
        qrcode_provider=EchoQRProvider(),
        time_provider=FixedTimeProvider(1426847216),
    )
