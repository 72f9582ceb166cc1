from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from norwedfilm.core.config import settings

# The engine owns the connection pool for the configured database.
engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)

# One Session per request; see get_db below.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        # Runs after the endpoint has finished, even if it raised.
        db.close()
