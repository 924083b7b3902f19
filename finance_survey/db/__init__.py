"""Database module - PostgreSQL, MongoDB, Redis connections."""

from finance_survey.db.postgres import get_db, Base
from finance_survey.db.mongodb import get_mongodb
from finance_survey.db.redis import get_redis, jwt_blacklist

__all__ = [
    "get_db",
    "Base",
    "get_mongodb",
    "get_redis",
    "jwt_blacklist",
]
