"""ロギング設定"""
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# WARNING以上のみ出力する外部ライブラリ
THIRD_PARTY_LOGGERS = ("requests", "urllib3", "google.cloud.secretmanager", "google.auth")

# このモジュールが追加したハンドラー
_handlers: list[logging.Handler] = []


def _parse_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def set_log_level(level: str) -> None:
    """
    ルートロガーと設定済みハンドラーのログレベルを変更

    Args:
        level: ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    log_level = _parse_level(level)

    logging.getLogger().setLevel(log_level)
    for handler in _handlers:
        handler.setLevel(log_level)


def setup_logging(
    level: str = "INFO",
    enable_cloud_logging: bool = False,
    project_id: Optional[str] = None,
) -> None:
    """
    ロギングを設定

    2回目以降の呼び出しではハンドラーを追加せず、ログレベルのみ反映する
    （サーバー起動後にCLIの --log-level を指定した場合など）。

    Args:
        level: ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_cloud_logging: Cloud Loggingを有効にするか（Cloud Run用）
        project_id: GCPプロジェクトID
    """
    if _handlers:
        set_log_level(level)
        logging.getLogger(__name__).debug(f"Log level changed to {level}")
        return

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)
    _handlers.append(console_handler)

    if enable_cloud_logging:
        try:
            from google.cloud import logging as cloud_logging

            client = cloud_logging.Client(project=project_id)
            cloud_handler = cloud_logging.handlers.CloudLoggingHandler(client)
            root_logger.addHandler(cloud_handler)
            _handlers.append(cloud_handler)
        except Exception as e:
            logging.warning(f"Failed to enable Cloud Logging: {e}")

    set_log_level(level)

    for name in THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.info(
        f"Logging configured with level: {level} (cloud_logging={len(_handlers) > 1})"
    )


def get_logger(name: str) -> logging.Logger:
    """
    指定名のロガーを取得

    Args:
        name: ロガー名（通常は__name__を指定）

    Returns:
        ロガーインスタンス
    """
    return logging.getLogger(name)
