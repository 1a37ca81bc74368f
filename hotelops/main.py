"""
HotelOps 主应用入口
酒店运营后台：客人、房间、预订、服务请求、入住退房、仪表盘、房内平板
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from hotelops.config import settings
from hotelops.database import init_db
from hotelops.exceptions import HotelOpsError
from hotelops.routers import (
    guests, rooms, reservations, service_requests, room_service_orders,
    housekeeping, catalog, stays, dashboard, tablet
)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    # 启动时初始化数据库
    init_db()
    logger.info(f"{settings.APP_NAME} {settings.VERSION} 已启动")

    yield

    logger.info(f"{settings.APP_NAME} 已关闭")


# 创建应用
app = FastAPI(
    title=f"{settings.APP_NAME} - 酒店运营管理系统",
    description="客人、房间、预订、服务请求与入住退房管理 API",
    version=settings.VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

# CORS 配置
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============== 异常处理 ==============

def _error_body(message: str, error: str, details=None) -> dict:
    body = {"success": False, "message": message, "error": error}
    if details:
        body["details"] = details
    return body


@app.exception_handler(HotelOpsError)
async def hotelops_error_handler(request: Request, exc: HotelOpsError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} 失败: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.message, exc.error_code, exc.details),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = []
    for err in exc.errors():
        # loc 形如 ("body", "email") / ("query", "page")
        field = ".".join(str(part) for part in err.get("loc", ())[1:]) or "body"
        details.append({"field": field, "message": err.get("msg", "")})

    summary = "; ".join(f"{d['field']}: {d['message']}" for d in details)
    return JSONResponse(
        status_code=400,
        content=_error_body(f"请求参数不合法: {summary}", "validation_error", details),
    )


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"{request.method} {request.url.path} 违反约束: {exc.orig}")
    return JSONResponse(
        status_code=409,
        content=_error_body("数据违反唯一性约束", "conflict"),
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"{request.method} {request.url.path} 数据库错误")
    return JSONResponse(
        status_code=500,
        content=_error_body("服务器内部错误", "internal_error"),
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    error = "not_found" if exc.status_code == 404 else "http_error"
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail), error),
        headers=getattr(exc, "headers", None),
    )


# ============== 注册路由 ==============

for api_router in (
    guests.router,
    rooms.router,
    reservations.router,
    service_requests.router,
    room_service_orders.router,
    housekeeping.housekeeping_router,
    housekeeping.maintenance_router,
    catalog.menu_router,
    catalog.staff_router,
    stays.checkin_router,
    stays.checkout_router,
    dashboard.router,
    tablet.router,
):
    app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def root():
    """根路径"""
    return {
        "success": True,
        "message": f"{settings.APP_NAME} API",
        "data": {
            "name": settings.APP_NAME,
            "version": settings.VERSION,
            "api_prefix": settings.API_PREFIX,
        },
    }


@app.get("/health")
def health_check():
    """健康检查"""
    return {
        "success": True,
        "message": "服务运行正常",
        "data": {"status": "healthy", "version": settings.VERSION},
    }


def run():
    """命令行启动：hotelops"""
    import uvicorn
    uvicorn.run("hotelops.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)


if __name__ == "__main__":
    run()
