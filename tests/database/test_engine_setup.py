from sqlalchemy import inspect, text

from tagcontent.database.core.main import Base, build_engine


def test_sqlite_engine_skips_pool_sizing():
    engine = build_engine("sqlite+pysqlite:///:memory:")
    try:
        assert engine.dialect.name == "sqlite"
        with engine.connect() as conn:
            assert conn.execute(text("select 1")).scalar() == 1
    finally:
        engine.dispose()


def test_tables_are_unqualified_and_service_columns_first():
    assert {t.schema for t in Base.metadata.sorted_tables} == {None}
    cols = [c.name for c in Base.metadata.tables["product_media"].columns]
    assert cols[:5] == ["id", "date_created", "last_updated", "data_origin", "meta_data"]
    assert "tag_key" in cols


def test_metadata_creates_every_table(db_engine):
    names = set(inspect(db_engine).get_table_names())
    assert {"option", "product_media", "attachment", "product_ingredient", "product_description"} <= names
