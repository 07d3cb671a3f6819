import pytest

from imagemanip.config import Settings


def test_from_env_defaults(monkeypatch):
    for name in ("IMAGEMANIP_HALO_PATH", "IMAGEMANIP_GRAIN_PATH", "IMAGEMANIP_GRAIN_SEED",
                 "IMAGEMANIP_DEFAULT_FORMAT", "IMAGEMANIP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    assert Settings.from_env() == Settings()


def test_from_env_reads_values(monkeypatch, tmp_path):
    monkeypatch.setenv("IMAGEMANIP_GRAIN_SEED", "7")
    monkeypatch.setenv("IMAGEMANIP_HALO_PATH", str(tmp_path / "halo.png"))
    monkeypatch.setenv("IMAGEMANIP_DEFAULT_FORMAT", "jpeg")
    settings = Settings.from_env()
    assert settings.grain_seed == 7
    assert settings.halo_path == tmp_path / "halo.png"
    assert settings.default_format == "JPEG"


def test_from_env_rejects_non_integer_seed(monkeypatch):
    monkeypatch.setenv("IMAGEMANIP_GRAIN_SEED", "abc")
    with pytest.raises(ValueError, match="IMAGEMANIP_GRAIN_SEED"):
        Settings.from_env()
