# /app/db/base_class.py

from sqlalchemy.orm import declarative_base

# Every ORM model inherits from this Base so `Store.create_all()` can see it.
Base = declarative_base()
