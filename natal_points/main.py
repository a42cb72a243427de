import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from natal_points.config import Settings, get_settings
from natal_points.exceptions import ChartAPIException, ExternalEngineError
from natal_points.routers import chart, docs, health

log = logging.getLogger("uvicorn")


async def chart_api_error_handler(request: Request, exc: ChartAPIException):
    """Fehler der API als {"error": <message>}."""
    if isinstance(exc, ExternalEngineError):
        log.error(f"{request.method} {request.url.path}: {exc}")
    else:
        log.info(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


async def general_exception_handler(request: Request, exc: Exception):
    """Alle übrigen Fehler -> 500 mit der Fehlermeldung."""
    log.exception(f"{request.method} {request.url.path} failed")
    return JSONResponse(status_code=500, content={"error": str(exc) or exc.__class__.__name__})


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="Natal Points API",
        description="Jupiter, Mondknoten, Pluto, Glückspunkt und MC via Swiss Ephemeris",
        version="1.0.0",
        servers=docs.servers_for(settings),
    )
    app.add_exception_handler(ChartAPIException, chart_api_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(docs.router)
    app.include_router(health.router)
    app.include_router(chart.router)
    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run("natal_points.main:app", host="0.0.0.0", port=settings.port, log_level=settings.log_level)


if __name__ == "__main__":
    run()
