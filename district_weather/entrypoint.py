"""CLIエントリーポイント"""
import argparse
import json
import sys
from typing import Optional

from .features.lookup.orchestrator import LookupOrchestrator
from .infrastructure.config.settings import Settings
from .shared.exceptions.errors import WeatherLookupError
from .shared.logging.config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """引数パーサーを作成"""
    parser = argparse.ArgumentParser(
        description="行政区域の座標・天気検索ツール"
    )

    parser.add_argument(
        "--query",
        type=str,
        help="座標に変換する行政区域（例: 서울특별시-종로구-청운동）",
    )

    parser.add_argument(
        "--lat",
        type=str,
        help="天気を取得する緯度",
    )

    parser.add_argument(
        "--lon",
        type=str,
        help="天気を取得する経度",
    )

    parser.add_argument(
        "--weather",
        action="store_true",
        help="--query で解決した座標の天気も取得",
    )

    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="環境変数ファイルのパス（デフォルト: .env）",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="ログレベル",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    メインエントリーポイント

    Returns:
        int: 終了コード（0: 成功, 1: 失敗, 2: 引数エラー）
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.query and not (args.lat and args.lon):
        parser.print_usage(sys.stderr)
        print("error: --query または --lat/--lon を指定してください", file=sys.stderr)
        return 2

    try:
        settings = Settings(_env_file=args.env_file)

        if args.log_level:
            settings.log_level = args.log_level

        setup_logging(level=settings.log_level)

        orchestrator = LookupOrchestrator(settings)
        output: dict = {}

        lat, lon = args.lat, args.lon

        if args.query:
            location = orchestrator.geocoding_service.resolve(args.query)
            output["location"] = location.to_dict()
            if args.weather:
                lat, lon = str(location.lat), str(location.lon)

        if lat and lon and (args.weather or not args.query):
            weather = orchestrator.weather_service.get_weather(lat, lon)
            output["weather"] = weather.to_dict()

        print(json.dumps(output, ensure_ascii=False, indent=2))
        return 0

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130  # SIGINT
    except WeatherLookupError as e:
        logger.error(f"Lookup failed: {type(e).__name__}: {e}")
        return 1
    except Exception as e:
        logger.error(f"Application failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
