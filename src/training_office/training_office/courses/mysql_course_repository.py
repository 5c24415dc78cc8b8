from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_decimal
from .model import Course
from .repository import CourseRepository

_COURSE_COLUMNS = """
    id, name, fee, online_rate, offline_rate, private_rate, batch_rate, duration, active
"""


def _to_course(r: Dict[str, Any]) -> Course:
    return Course(
        course_id=int(r["id"]),
        name=r["name"],
        fee=normalize_mysql_decimal(r["fee"]) or Decimal("0"),
        online_rate=normalize_mysql_decimal(r.get("online_rate")),
        offline_rate=normalize_mysql_decimal(r.get("offline_rate")),
        private_rate=normalize_mysql_decimal(r.get("private_rate")),
        batch_rate=normalize_mysql_decimal(r.get("batch_rate")),
        duration=r.get("duration"),
        active=bool(r.get("active", 1)),
    )


class MySQLCourseRepository(CourseRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self) -> Sequence[Course]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COURSE_COLUMNS}
                FROM courses
                WHERE active = 1
                ORDER BY name
                """
            )
            return [_to_course(r) for r in fetchall(cur)]

    def get_by_id(self, course_id: int) -> Optional[Course]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COURSE_COLUMNS}
                FROM courses
                WHERE id=%s
                """,
                (course_id,),
            )
            r = fetchone(cur)
            return _to_course(r) if r else None
