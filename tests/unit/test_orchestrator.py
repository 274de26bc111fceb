"""検索オーケストレーター・設定のテスト"""

from unittest.mock import MagicMock, patch

import pytest

from district_weather.features.lookup.orchestrator import LookupOrchestrator
from district_weather.infrastructure.config.settings import Settings
from district_weather.infrastructure.gcp.secret_manager import SecretManagerClient
from district_weather.shared.exceptions.errors import ConfigurationError

ORCHESTRATOR = "district_weather.features.lookup.orchestrator"


@pytest.fixture(autouse=True)
def clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """環境変数の影響を受けないようにする"""
    for name in ("OPENWEATHERMAP_API_KEY", "ENVIRONMENT", "GCP_PROJECT_ID", "GEOCODING_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.openweathermap_api_key is None
    assert settings.geocoding_timeout == 5.0
    assert settings.geocoding_base_url == "https://api.openweathermap.org/geo/1.0/direct"
    assert settings.is_development


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENWEATHERMAP_API_KEY", "env-key")
    monkeypatch.setenv("GEOCODING_TIMEOUT", "2.5")

    settings = Settings(_env_file=None)

    assert settings.openweathermap_api_key == "env-key"
    assert settings.geocoding_timeout == 2.5


def test_services_use_configured_api_key() -> None:
    """設定のAPIキーでジオコーダーを作成する"""
    settings = Settings(_env_file=None, openweathermap_api_key="local-key", geocoding_timeout=3.0)

    orchestrator = LookupOrchestrator(settings)

    geocoder = orchestrator.geocoding_service.geocoder
    assert geocoder is not None
    assert geocoder.api_key == "local-key"
    assert geocoder.http_client.timeout == 3.0
    assert geocoder.http_client.max_retries == 0
    assert orchestrator.weather_service.client is not None
    assert orchestrator.secret_manager is None


def test_missing_api_key_leaves_services_unconfigured() -> None:
    """APIキーが無い場合は呼び出し時にConfigurationError"""
    orchestrator = LookupOrchestrator(Settings(_env_file=None))

    assert orchestrator.geocoding_service.geocoder is None
    with pytest.raises(ConfigurationError):
        orchestrator.geocoding_service.resolve("서울특별시-종로구-청운동")
    with pytest.raises(ConfigurationError):
        orchestrator.weather_service.get_weather("37.5", "127.0")


def test_api_key_from_secret_manager() -> None:
    """本番環境では設定が無ければSecret Managerから取得する"""
    settings = Settings(_env_file=None, environment="production", gcp_project_id="demo-project")

    with patch(f"{ORCHESTRATOR}.SecretManagerClient") as secret_manager_cls:
        secret_manager_cls.return_value.get_secret_or_none.return_value = "secret-key"
        orchestrator = LookupOrchestrator(settings)

    secret_manager_cls.assert_called_once_with("demo-project")
    secret_manager_cls.return_value.get_secret_or_none.assert_called_once_with(
        "openweathermap-api-key"
    )
    assert orchestrator.api_key == "secret-key"


def test_secret_manager_client_strips_value() -> None:
    """シークレット値の末尾改行を除去する"""
    gcp_client = MagicMock()
    gcp_client.access_secret_version.return_value.payload.data = b"secret-key\n"

    client = SecretManagerClient("demo-project", client=gcp_client)

    assert client.get_secret("openweathermap-api-key") == "secret-key"
    gcp_client.access_secret_version.assert_called_once_with(
        request={"name": "projects/demo-project/secrets/openweathermap-api-key/versions/latest"}
    )


def test_secret_manager_client_failure_returns_none() -> None:
    gcp_client = MagicMock()
    gcp_client.access_secret_version.side_effect = RuntimeError("permission denied")

    client = SecretManagerClient("demo-project", client=gcp_client)

    with pytest.raises(ConfigurationError):
        client.get_secret("openweathermap-api-key")
    assert client.get_secret_or_none("openweathermap-api-key") is None


def test_secret_manager_unavailable_leaves_services_unconfigured() -> None:
    """Secret Managerを作成できない場合はAPIキーなしとして扱う"""
    settings = Settings(_env_file=None, environment="production", gcp_project_id="demo-project")

    with patch(
        "district_weather.infrastructure.gcp.secret_manager.secretmanager.SecretManagerServiceClient",
        side_effect=RuntimeError("default credentials not found"),
    ):
        orchestrator = LookupOrchestrator(settings)

    assert orchestrator.secret_manager is None
    assert orchestrator.api_key is None
    assert orchestrator.geocoding_service.geocoder is None


def test_configured_api_key_skips_secret_manager() -> None:
    """設定にAPIキーがあればSecret Managerを作成しない"""
    settings = Settings(
        _env_file=None,
        environment="production",
        gcp_project_id="demo-project",
        openweathermap_api_key="local-key",
    )

    with patch(f"{ORCHESTRATOR}.SecretManagerClient") as secret_manager_cls:
        orchestrator = LookupOrchestrator(settings)

    secret_manager_cls.assert_not_called()
    assert orchestrator.api_key == "local-key"
