"""
Tests for environment-backed settings, the settings factory and the CLI.
"""

from unittest.mock import MagicMock

import pytest

from llm_gateway import cli
from llm_gateway.config.settings import Settings
from llm_gateway.llm import service as service_module
from llm_gateway.llm.service import OpenAIService
from llm_gateway.utils.errors import InvalidConfiguration

ENV = {
    "OPENAI_ENDPOINT": "https://cosmic-works.openai.azure.com/",
    "OPENAI_KEY": "azure-key-0123456789",
    "OPENAI_EMBEDDINGS_DEPLOYMENT": "embeddings",
    "OPENAI_COMPLETIONS_DEPLOYMENT": "completions",
    "OPENAI_MAX_CONVERSATION_TOKENS": "250",
    "OPENAI_MAX_COMPLETION_TOKENS": "not-a-number",
    "OPENAI_MAX_EMBEDDING_TOKENS": "4000",
}


@pytest.fixture
def gateway_env(monkeypatch):
    for name, value in ENV.items():
        monkeypatch.setenv(name, value)
    return ENV


@pytest.fixture
def quiet_cli(monkeypatch):
    monkeypatch.setattr(cli, "setup_logger", lambda *args, **kwargs: None)


def test_settings_read_environment(gateway_env):
    settings = Settings()
    assert settings.openai_endpoint == ENV["OPENAI_ENDPOINT"]
    assert settings.openai_key == ENV["OPENAI_KEY"]
    assert settings.openai_max_completion_tokens == "not-a-number"
    assert settings.openai_api_version == "2024-06-01"


def test_from_settings(gateway_env, monkeypatch):
    client = MagicMock()
    monkeypatch.setattr(service_module, "create_openai_client", MagicMock(return_value=client))

    service = OpenAIService.from_settings(Settings())

    assert service.max_conversation_tokens == 250
    assert service.max_completion_tokens == 500
    assert service.max_embedding_tokens == 4000
    assert service.completions_deployment == "completions"
    assert service._client is client


def test_from_settings_requires_endpoint(gateway_env, monkeypatch):
    monkeypatch.setenv("OPENAI_ENDPOINT", "")
    with pytest.raises(InvalidConfiguration):
        OpenAIService.from_settings(Settings())


def test_cli_config(gateway_env, quiet_cli, monkeypatch, capsys):
    monkeypatch.setattr(service_module, "create_openai_client", MagicMock())

    assert cli.main(["config"]) == 0

    out = capsys.readouterr().out
    assert "mode=azure" in out
    assert "max_conversation_tokens=250" in out
    assert "max_completion_tokens=500" in out


def test_cli_invalid_configuration_exit_code(gateway_env, quiet_cli, monkeypatch):
    monkeypatch.setenv("OPENAI_KEY", "")
    assert cli.main(["config"]) == 2


def test_cli_summarize(gateway_env, quiet_cli, monkeypatch, capsys, fake_client, chat_response):
    fake_client.chat.completions.create.return_value = chat_response("Bike Repair!")
    monkeypatch.setattr(service_module, "create_openai_client", MagicMock(return_value=fake_client))

    assert cli.main(["summarize", "My chain keeps slipping", "--session", "s-1"]) == 0

    assert capsys.readouterr().out.strip() == "Bike Repair"
    assert fake_client.chat.completions.create.await_args.kwargs["user"] == "s-1"


def test_cli_embed_failure_exit_code(gateway_env, quiet_cli, monkeypatch, fake_client):
    fake_client.embeddings.create.side_effect = RuntimeError("boom")
    monkeypatch.setattr(service_module, "create_openai_client", MagicMock(return_value=fake_client))

    assert cli.main(["embed", "helmet"]) == 1


def test_cli_chat_reads_documents_file(gateway_env, quiet_cli, monkeypatch, capsys, tmp_path, fake_client, chat_response):
    documents = tmp_path / "products.json"
    documents.write_text('[{"name": "Mountain-100"}]', encoding="utf-8")
    fake_client.chat.completions.create.return_value = chat_response("In stock.", 80, 3)
    monkeypatch.setattr(service_module, "create_openai_client", MagicMock(return_value=fake_client))

    assert cli.main(["chat", "Is it in stock?", "--documents-file", str(documents)]) == 0

    out = capsys.readouterr().out
    assert "In stock." in out
    assert "prompt_tokens=80 response_tokens=3" in out
    system = fake_client.chat.completions.create.await_args.kwargs["messages"][0]["content"]
    assert system.endswith('[{"name": "Mountain-100"}]')


def test_cli_chat_missing_documents_file(gateway_env, quiet_cli, monkeypatch, tmp_path, fake_client):
    monkeypatch.setattr(service_module, "create_openai_client", MagicMock(return_value=fake_client))

    missing = tmp_path / "missing.json"
    assert cli.main(["chat", "Is it in stock?", "--documents-file", str(missing)]) == 2

    fake_client.chat.completions.create.assert_not_called()
