"""
SQL backend for match scores (SQLAlchemy).

skill_match_scores is the only table this service keeps in a database;
everything else lives in the in-memory repository. Any SQLAlchemy URL
works: SQLite by default, PostgreSQL in deployment.
"""

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import List, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from internlink.models import MatchScore

logger = logging.getLogger(__name__)


CREATE_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS skill_match_scores (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        student_id INTEGER NOT NULL,
        job_id INTEGER NOT NULL,
        score REAL NOT NULL,
        calculated_at TIMESTAMP NOT NULL,
        UNIQUE (student_id, job_id)
    )
"""

# PostgreSQL has no AUTOINCREMENT keyword
CREATE_TABLE_SQL_POSTGRES = """
    CREATE TABLE IF NOT EXISTS skill_match_scores (
        id SERIAL PRIMARY KEY,
        student_id INTEGER NOT NULL,
        job_id INTEGER NOT NULL,
        score REAL NOT NULL,
        calculated_at TIMESTAMP NOT NULL,
        UNIQUE (student_id, job_id)
    )
"""

SELECT_COLUMNS = "SELECT id, student_id, job_id, score, calculated_at FROM skill_match_scores"


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create an engine suited to the URL.

    SQLite in-memory URLs share one connection (StaticPool) so every session
    sees the same database; server databases get a connection pool.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **kwargs)

    # pool_size=5: maintain 5 connections ready
    # max_overflow=10: allow 10 extra connections under load
    return create_engine(database_url, pool_size=5, max_overflow=10, echo=echo)


def _row_to_score(row) -> MatchScore:
    calculated_at = row[4]
    # SQLite hands TIMESTAMP columns back as text through raw SQL
    if isinstance(calculated_at, str):
        calculated_at = datetime.fromisoformat(calculated_at)
    return MatchScore(
        id=row[0], student_id=row[1], job_id=row[2],
        score=float(row[3]), calculated_at=calculated_at
    )


class SqlMatchScoreStore:
    """
    Match score store over a skill_match_scores table.

    Uniqueness of (student_id, job_id) is enforced by the table; upsert is a
    single INSERT ... ON CONFLICT statement so concurrent writers to the same
    pair cannot create duplicates.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    @contextmanager
    def get_db_session(self):
        """
        Context manager for database sessions.
        Usage:
            with store.get_db_session() as db:
                db.execute(text("SELECT * FROM skill_match_scores"))
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def init_schema(self) -> None:
        """Create the skill_match_scores table if it is missing."""
        ddl = CREATE_TABLE_SQL_POSTGRES if self.engine.dialect.name == "postgresql" else CREATE_TABLE_SQL
        with self.get_db_session() as db:
            db.execute(text(ddl))
        logger.info("skill_match_scores table ready (%s)", self.engine.dialect.name)

    def test_connection(self) -> bool:
        """
        Test if the database is reachable.
        Returns True if connection successful, False otherwise.
        """
        try:
            with self.get_db_session() as db:
                row = db.execute(text("SELECT 1 as test")).fetchone()
                return row[0] == 1
        except Exception as e:
            logger.error("Match score database connection failed: %s", e)
            return False

    def upsert(self, student_id: int, job_id: int, score: float) -> MatchScore:
        with self.get_db_session() as db:
            db.execute(
                text("""
                    INSERT INTO skill_match_scores (student_id, job_id, score, calculated_at)
                    VALUES (:student_id, :job_id, :score, :calculated_at)
                    ON CONFLICT (student_id, job_id) DO UPDATE SET
                        score = EXCLUDED.score,
                        calculated_at = EXCLUDED.calculated_at
                """),
                {
                    "student_id": student_id,
                    "job_id": job_id,
                    "score": score,
                    "calculated_at": datetime.utcnow()
                }
            )
            row = db.execute(
                text(f"{SELECT_COLUMNS} WHERE student_id = :student_id AND job_id = :job_id"),
                {"student_id": student_id, "job_id": job_id}
            ).fetchone()

        logger.debug("Stored match score %s for student %s / job %s", score, student_id, job_id)
        return _row_to_score(row)

    def get(self, student_id: int, job_id: int) -> Optional[MatchScore]:
        with self.get_db_session() as db:
            row = db.execute(
                text(f"{SELECT_COLUMNS} WHERE student_id = :student_id AND job_id = :job_id"),
                {"student_id": student_id, "job_id": job_id}
            ).fetchone()
        return _row_to_score(row) if row else None

    def list_for_student(self, student_id: int) -> List[MatchScore]:
        with self.get_db_session() as db:
            rows = db.execute(
                text(f"{SELECT_COLUMNS} WHERE student_id = :student_id ORDER BY id"),
                {"student_id": student_id}
            ).fetchall()
        return [_row_to_score(r) for r in rows]

    def list_for_job(self, job_id: int) -> List[MatchScore]:
        with self.get_db_session() as db:
            rows = db.execute(
                text(f"{SELECT_COLUMNS} WHERE job_id = :job_id ORDER BY id"),
                {"job_id": job_id}
            ).fetchall()
        return [_row_to_score(r) for r in rows]

    def count(self) -> int:
        with self.get_db_session() as db:
            return db.execute(text("SELECT COUNT(*) FROM skill_match_scores")).scalar()
