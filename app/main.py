"""FastAPI主应用入口

工单管理 RESTful API
- 使用依赖注入管理数据库会话
- 统一的异常处理：404 / 409 / 422 / 500 转换为 {"error": ...}
- 每个请求记录一条访问日志
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from .api.v1 import health_router, work_orders_router
from .config.settings import settings
from .core.exceptions import WorkOrderNumberConflict
from .core.logging_config import configure_logging
from .database.connection import Base, engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    if settings.CREATE_TABLES_ON_STARTUP:
        Base.metadata.create_all(bind=engine)
    logger.info("Work order API started (database: %s)", engine.url.render_as_string(hide_password=True))
    yield


# 创建FastAPI应用实例
app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 挂载API路由
app.include_router(health_router, prefix="/api")
app.include_router(work_orders_router, prefix="/api/work-orders")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """访问日志"""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s %s",
        request.method,
        request.url.path,
        response.status_code,
        extra={
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(WorkOrderNumberConflict)
async def number_conflict_handler(request: Request, exc: WorkOrderNumberConflict):
    logger.warning("Work order number conflict: %s", exc)
    return JSONResponse(status_code=409, content={"error": "Work order number conflict, please retry"})


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    # 详细错误只记录在服务端
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Server error"})
