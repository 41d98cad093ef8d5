import logging

import pytest

from pixelbridge.config import Settings, load_settings
from pixelbridge.controllers.transform_controller import PixelBufferTransform
from pixelbridge.log import HANDLER_NAME, LOG_FORMAT, setup_logging
from pixelbridge.models.image_model import PackedImage

ENV_VARS = ("PIXELBRIDGE_LOG_LEVEL", "PIXELBRIDGE_VECTORIZED")


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch restores the variables even if .env loading sets them
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults(clean_env, tmp_path):
    settings = load_settings(tmp_path / "missing.env")

    assert settings == Settings(log_level="WARNING", vectorized=True)


def test_reads_environment(clean_env, tmp_path):
    clean_env.setenv("PIXELBRIDGE_LOG_LEVEL", "debug")
    clean_env.setenv("PIXELBRIDGE_VECTORIZED", "No")

    settings = load_settings(tmp_path / "missing.env")

    assert settings.log_level == "DEBUG"
    assert settings.vectorized is False


def test_reads_dotenv_file_without_overriding_environment(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PIXELBRIDGE_LOG_LEVEL=INFO\nPIXELBRIDGE_VECTORIZED=off\n")
    clean_env.setenv("PIXELBRIDGE_LOG_LEVEL", "ERROR")

    settings = load_settings(env_file)

    assert settings.log_level == "ERROR"
    assert settings.vectorized is False


def test_rejects_bad_boolean(clean_env, tmp_path):
    clean_env.setenv("PIXELBRIDGE_VECTORIZED", "maybe")

    with pytest.raises(ValueError):
        load_settings(tmp_path / "missing.env")


def test_controller_uses_per_pixel_path_when_disabled(clean_env, tmp_path):
    clean_env.setenv("PIXELBRIDGE_VECTORIZED", "0")
    transform = PixelBufferTransform(settings=load_settings(tmp_path / "missing.env"))

    assert transform._convert_service._vectorized is False


@pytest.fixture
def package_logger():
    logger = logging.getLogger("pixelbridge")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_setup_logging_adds_one_handler(package_logger):
    logger = setup_logging("DEBUG")
    setup_logging(logging.INFO)

    ours = [h for h in logger.handlers if h.get_name() == HANDLER_NAME]
    assert logger is package_logger
    assert len(ours) == 1
    assert ours[0].formatter._fmt == LOG_FORMAT
    assert logger.level == logging.INFO


def test_setup_logging_defaults_to_settings(package_logger, clean_env):
    clean_env.setenv("PIXELBRIDGE_LOG_LEVEL", "ERROR")

    assert setup_logging().level == logging.ERROR


def test_operations_log_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="pixelbridge")
    transform = PixelBufferTransform(settings=Settings())

    transform.rotate90(PackedImage.from_pixels(2, 1, [1, 2]), clockwise=True)

    assert any(r.levelno == logging.DEBUG and "rotating 2x1 by 90 (cw)" in r.getMessage() for r in caplog.records)


def test_default_controller_ignores_environment(clean_env):
    clean_env.setenv("PIXELBRIDGE_VECTORIZED", "maybe")

    transform = PixelBufferTransform()

    assert transform.settings == Settings()
    assert transform.rotate180(PackedImage.from_pixels(2, 1, [1, 2])).to_list() == [2, 1]
