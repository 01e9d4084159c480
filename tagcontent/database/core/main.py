# tagcontent/database/core/main.py
from __future__ import annotations

from functools import lru_cache
from typing import List

from sqlalchemy import Column, MetaData, Table, create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from tagcontent.common.settings import get_settings

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

_serviceobject_first = ("id", "date_created", "last_updated", "data_origin", "meta_data")


class Base(DeclarativeBase):
    # Tables are unqualified; on Postgres the app schema is put first on the search_path.
    metadata = MetaData(naming_convention=NAMING_CONVENTION)

    @classmethod
    def __table_cls__(cls, *args, **kw):
        """Reorder columns so ServiceObject fields come first."""
        if not args:
            return super().__table_cls__(*args, **kw)

        name, metadata, *rest = args
        cols: List[Column] = [x for x in rest if isinstance(x, Column)]
        others = [x for x in rest if not isinstance(x, Column)]

        priority = {n: i for i, n in enumerate(_serviceobject_first)}
        original_index = {c: i for i, c in enumerate(cols)}
        cols.sort(key=lambda c: (priority.get(c.name, 10_000), original_index[c]))

        return Table(name, metadata, *(cols + others), **kw)


def build_engine(url: str | None = None, **overrides) -> Engine:
    """
    Create an engine from settings (or an explicit URL). SQLite URLs skip
    pool sizing, which its single-connection pools do not accept.
    """
    cfg = get_settings()
    url = url or cfg.database_url
    kwargs = {"echo": cfg.db.echo, "future": True}
    if not url.startswith("sqlite"):
        kwargs.update(
            pool_size=cfg.db.pool_size,
            max_overflow=cfg.db.max_overflow,
            pool_pre_ping=cfg.db.pool_pre_ping,
            pool_recycle=cfg.db.pool_recycle,
        )
    kwargs.update(overrides)
    engine = create_engine(url, **kwargs)

    schema = cfg.db_schema
    if schema and not url.startswith("sqlite"):
        @event.listens_for(engine, "connect")
        def _set_search_path(dbapi_conn, _):
            with dbapi_conn.cursor() as cur:
                cur.execute(f'SET search_path TO "{schema}", public')

    return engine


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    return build_engine()


SessionLocal = sessionmaker(expire_on_commit=False, future=True, autoflush=False)


def new_session() -> Session:
    return SessionLocal(bind=get_engine())

