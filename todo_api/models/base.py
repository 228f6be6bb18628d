from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from todo_api.config import settings

Base = declarative_base()

connect_args = {'check_same_thread': False} if settings.is_sqlite else {}

engine = create_engine(
    settings.database_url,
    connect_args=connect_args,
    echo=settings.database_echo,
    pool_pre_ping=True,
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
