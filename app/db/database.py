from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from app.config import getSettings

settings = getSettings()

connectArgs = {"check_same_thread": False} if settings.databaseUrl.startswith("sqlite") else {}

engine = create_engine(settings.databaseUrl, connect_args=connectArgs, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def getDb():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
