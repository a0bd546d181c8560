import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import getSettings
from app.db.database import Base, engine
from app.db.errors import CarShareError
from app.models import booking, car, favorite, message, user, verificationDocument  # noqa: F401  registers tables
from app.routes.auth import router as authRouter
from app.routes.booking import router as bookingRouter
from app.routes.car import router as carRouter
from app.routes.favorite import router as favoriteRouter
from app.routes.host import router as hostRouter
from app.routes.message import router as messageRouter
from app.routes.user import router as userRouter
from app.routes.verification import router as verificationRouter

settings = getSettings()

logging.basicConfig(
    level=settings.logLevel,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Alembic owns the schema in deployed databases; this covers local SQLite runs
    if settings.databaseUrl.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(title="Car Sharing Marketplace", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.corsOrigins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CarShareError)
def handleCarShareError(request: Request, exc: CarShareError):
    if exc.statusCode >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.statusCode, content=exc.toDict())


app.include_router(authRouter)
app.include_router(userRouter)
app.include_router(carRouter)
app.include_router(hostRouter)
app.include_router(bookingRouter)
app.include_router(favoriteRouter)
app.include_router(messageRouter)
app.include_router(verificationRouter)


@app.get("/health")
def healthCheck():
    return {
        "status": "OK",
        "service": "carshare-backend"
    }
