"""GCP Secret Manager連携"""
from typing import Any, Optional

from google.cloud import secretmanager

from ...shared.exceptions.errors import ConfigurationError
from ...shared.logging.config import get_logger

logger = get_logger(__name__)


class SecretManagerClient:
    """Secret Managerクライアント（APIキー取得用）"""

    def __init__(self, project_id: str, client: Optional[Any] = None):
        """
        Args:
            project_id: GCPプロジェクトID
            client: SecretManagerServiceClient（省略時は作成）

        Raises:
            ConfigurationError: クライアントを作成できない場合（認証情報なしなど）
        """
        self.project_id = project_id

        if client is None:
            try:
                client = secretmanager.SecretManagerServiceClient()
            except Exception as e:
                raise ConfigurationError(f"Failed to create Secret Manager client: {e}") from e

        self.client = client

    def secret_path(self, secret_name: str, version: str = "latest") -> str:
        """シークレットバージョンのリソース名"""
        return f"projects/{self.project_id}/secrets/{secret_name}/versions/{version}"

    def get_secret(self, secret_name: str, version: str = "latest") -> str:
        """
        シークレットの値を取得（前後の空白・改行は除去）

        Raises:
            ConfigurationError: 取得失敗時、または値が空の場合
        """
        name = self.secret_path(secret_name, version)

        try:
            response = self.client.access_secret_version(request={"name": name})
            value = response.payload.data.decode("UTF-8").strip()
        except Exception as e:
            logger.error(f"Failed to fetch secret {secret_name}: {e}")
            raise ConfigurationError(f"Failed to fetch secret {secret_name}: {e}") from e

        if not value:
            raise ConfigurationError(f"Secret {secret_name} is empty")

        logger.info(f"Successfully fetched secret: {secret_name}")
        return value

    def get_secret_or_none(self, secret_name: str, version: str = "latest") -> Optional[str]:
        """シークレットの値を取得（失敗時はNone）"""
        try:
            return self.get_secret(secret_name, version)
        except ConfigurationError:
            logger.warning(f"Secret {secret_name} unavailable, returning None")
            return None
