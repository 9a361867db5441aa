import pytest
from pydantic import ValidationError

from latlon import config, encode, get_config, setup
from latlon.config import GeohashConfig, load_config
from latlon.exceptions import InvalidPrecisionError


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(config.MAX_PRECISION_ENV, raising=False)
    monkeypatch.delenv(config.VALIDATE_COORDINATES_ENV, raising=False)
    config.reset()
    yield
    config.reset()


def test_defaults() -> None:
    cfg = get_config()
    assert cfg == GeohashConfig()
    assert cfg.max_precision == 12
    assert cfg.validate_coordinates is True


def test_load_config_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(config.MAX_PRECISION_ENV, "8")
    monkeypatch.setenv(config.VALIDATE_COORDINATES_ENV, "false")
    cfg = load_config()
    assert cfg.max_precision == 8
    assert cfg.validate_coordinates is False


def test_setup_installs_default() -> None:
    cfg = setup(max_precision=5)
    assert get_config() is cfg
    assert encode(57.648, 10.41) == "u4pru"
    with pytest.raises(InvalidPrecisionError):
        encode(57.648, 10.41, 6)


def test_setup_rejects_invalid_values() -> None:
    with pytest.raises(ValidationError):
        setup(max_precision=0)


def test_config_is_frozen() -> None:
    cfg = GeohashConfig()
    with pytest.raises(ValidationError):
        cfg.max_precision = 4
