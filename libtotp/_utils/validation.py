from libtotp.exc import ConfigurationError


def validate_positive(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an integer, not {type(value).__name__}"
        raise ConfigurationError(msg)
    if value <= 0:
        msg = f"{name} must be > 0"
        raise ConfigurationError(msg)
