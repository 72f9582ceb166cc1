# norwedfilm/db/base_class.py

from sqlalchemy.orm import declarative_base

# Every model registers its table on Base.metadata; Alembic reads it from there.
Base = declarative_base()
