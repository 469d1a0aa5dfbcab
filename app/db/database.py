from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import settings
from sqlalchemy.pool import QueuePool, StaticPool
from sqlalchemy.exc import OperationalError
import logging

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


def build_engine(db_url: str):
    if db_url.startswith("sqlite"):
        # In-memory SQLite must share a single connection across threads
        pool_options = {"poolclass": StaticPool} if ":memory:" in db_url or db_url == "sqlite://" else {}
        return create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            **pool_options
        )

    connect_args = {"connect_timeout": 60}
    if settings.DATABASE_SSL_MODE:
        connect_args["sslmode"] = settings.DATABASE_SSL_MODE

    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=settings.DATABASE_MAX_OVERFLOW,
        pool_timeout=settings.DATABASE_POOL_TIMEOUT,
        pool_pre_ping=True,
        pool_recycle=settings.DATABASE_POOL_RECYCLE,
        connect_args=connect_args
    )


try:
    db_url = settings.DATABASE_URL
    logger.info("Initializing database connection...")

    engine = build_engine(db_url)

    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
        logger.info("Database connection successful")

except Exception as e:
    logger.error(f"Database connection error: {str(e)}")
    raise

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def init_db():
    # Registers every table on Base.metadata
    import app.models.user  # noqa: F401
    import app.models.client  # noqa: F401
    import app.models.project  # noqa: F401
    import app.models.business_plan  # noqa: F401
    import app.models.expense  # noqa: F401
    import app.models.task  # noqa: F401
    import app.models.activity  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    except OperationalError as e:
        logger.error(f"Database operation failed: {str(e)}")
        db.rollback()
        raise
    finally:
        db.close()
