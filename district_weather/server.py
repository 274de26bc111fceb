"""Cloud Run用HTTPサーバー（FastAPI）"""
from functools import lru_cache
from typing import Any, Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse

from .features.geocoding.services.geocoding_service import GeocodingService
from .features.lookup.orchestrator import LookupOrchestrator
from .features.weather.services.weather_service import WeatherService
from .infrastructure.config.settings import Settings
from .shared.exceptions.errors import (
    ConfigurationError,
    LocationNotFoundError,
    MissingCoordinatesError,
    MissingQueryError,
    WeatherApiError,
    WeatherNotFoundError,
)
from .shared.logging.config import get_logger, setup_logging

# 設定を読み込み
settings = Settings()

# ロギングを設定
setup_logging(
    level=settings.log_level,
    enable_cloud_logging=settings.gcp_logging_enabled,
    project_id=settings.gcp_project_id,
)
logger = get_logger(__name__)

# FastAPIアプリケーションを作成
app = FastAPI(
    title="行政区域天気検索サービス",
    description="韓国の行政区域名を座標に変換し、現在の天気と時間別予報を提供するAPI",
    version="1.0.0",
)


def error_response(status_code: int, error: str) -> JSONResponse:
    """{"error": CODE} 形式のエラーレスポンスを作成"""
    return JSONResponse(status_code=status_code, content={"error": error})


@lru_cache(maxsize=1)
def get_orchestrator() -> LookupOrchestrator:
    """オーケストレーターを取得（プロセス内で1つ）"""
    return LookupOrchestrator(settings)


def get_geocoding_service() -> GeocodingService:
    return get_orchestrator().geocoding_service


def get_weather_service() -> WeatherService:
    return get_orchestrator().weather_service


@app.on_event("startup")
async def startup_event() -> None:
    """起動時の処理"""
    logger.info("Application starting up")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Project: {settings.project_name}")


@app.on_event("shutdown")
async def shutdown_event() -> None:
    """シャットダウン時の処理"""
    logger.info("Application shutting down")


@app.get("/")
async def root() -> dict[str, Any]:
    """ルートエンドポイント"""
    return {
        "service": settings.project_name,
        "version": "1.0.0",
        "status": "running",
        "environment": settings.environment,
    }


@app.get("/health")
async def health() -> dict[str, str]:
    """ヘルスチェックエンドポイント"""
    return {"status": "healthy"}


@app.get("/api/geocode", response_model=None)
def geocode(
    q: Optional[str] = Query(default=None, description="行政区域（例: 서울특별시-종로구-청운동）"),
    service: GeocodingService = Depends(get_geocoding_service),
) -> Any:
    """
    行政区域名を座標に変換

    Args:
        q: "市・道-区・郡-洞" 形式の地名
        service: ジオコーディングサービス

    Returns:
        {"lat", "lon", "name"} または {"error": CODE}
    """
    try:
        location = service.resolve(q)
        return location.to_dict()

    except MissingQueryError:
        return error_response(400, "MISSING_QUERY")
    except LocationNotFoundError:
        return error_response(404, "NOT_FOUND")
    except ConfigurationError as e:
        logger.error(f"Geocoding is not configured: {e}")
        return error_response(500, "INTERNAL_ERROR")
    except Exception as e:
        logger.error(f"Geocoding error: {e}", exc_info=True)
        return error_response(500, "INTERNAL_ERROR")


@app.get("/api/weather", response_model=None)
def weather(
    lat: Optional[str] = Query(default=None, description="緯度"),
    lon: Optional[str] = Query(default=None, description="経度"),
    service: WeatherService = Depends(get_weather_service),
) -> Any:
    """
    座標の天気情報を取得

    Args:
        lat: 緯度
        lon: 経度
        service: 天気サービス

    Returns:
        {"current", "today", "hourly"} または {"error": CODE}
    """
    try:
        data = service.get_weather(lat, lon)
        return data.to_dict()

    except MissingCoordinatesError:
        return error_response(400, "MISSING_COORDINATES")
    except WeatherNotFoundError:
        return error_response(404, "NOT_FOUND")
    except WeatherApiError as e:
        logger.error(f"OpenWeatherMap API error: {e}")
        return error_response(500, "API_ERROR")
    except ConfigurationError as e:
        logger.error(f"Weather lookup is not configured: {e}")
        return error_response(500, "INTERNAL_ERROR")
    except Exception as e:
        logger.error(f"Weather API error: {e}", exc_info=True)
        return error_response(500, "INTERNAL_ERROR")


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """グローバル例外ハンドラー"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return error_response(500, "INTERNAL_ERROR")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
