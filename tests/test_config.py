import os

from src.config import DEFAULT_HOST, DEFAULT_PORT, env_flag, load_env, server_address


def test_env_flag(monkeypatch):
    for value in ("1", "true", "YES", "True"):
        monkeypatch.setenv("DRY_RUN", value)
        assert env_flag("DRY_RUN")
    for value in ("0", "false", "no", ""):
        monkeypatch.setenv("DRY_RUN", value)
        assert not env_flag("DRY_RUN")
    monkeypatch.delenv("DRY_RUN")
    assert not env_flag("DRY_RUN")
    assert env_flag("DRY_RUN", default="true")


def test_server_address_defaults_and_env(monkeypatch):
    monkeypatch.delenv("APP_HOST", raising=False)
    monkeypatch.delenv("APP_PORT", raising=False)
    assert server_address() == (DEFAULT_HOST, DEFAULT_PORT)

    monkeypatch.setenv("APP_HOST", "0.0.0.0")
    monkeypatch.setenv("APP_PORT", "8080")
    assert server_address() == ("0.0.0.0", 8080)


def test_load_env_reads_file_without_overriding(monkeypatch, tmp_path):
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text("REPLICATE_MODEL_ID=owner/from-file\nAPP_PORT=9000\n")

    # register both keys with monkeypatch so values loaded here are undone after the test
    monkeypatch.setenv("REPLICATE_MODEL_ID", "placeholder")
    monkeypatch.delenv("REPLICATE_MODEL_ID")
    monkeypatch.setenv("APP_PORT", "7000")

    load_env(str(dotenv_file))

    assert os.getenv("REPLICATE_MODEL_ID") == "owner/from-file"
    assert os.getenv("APP_PORT") == "7000"
