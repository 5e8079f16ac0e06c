"""
Database Settings Store

Reads settings from a relational table with one row per setting:

    Section | Key | Value

Rows are addressed as "{Section}:{Key}". Built on SQLAlchemy Core so any
database with a SQLAlchemy dialect can hold the table.
"""

from typing import Dict, Optional, Union

from sqlalchemy import Column, MetaData, PrimaryKeyConstraint, String, Table, create_engine, func, select
from sqlalchemy.engine import Engine

from confprovider.stores.base_store import SettingsStore, make_setting_key
from confprovider.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TABLE_NAME = 'ConfigurationSource'


def settings_table(metadata: MetaData, table_name: str = DEFAULT_TABLE_NAME) -> Table:
    """Describe the Section/Key/Value settings table."""
    return Table(
        table_name,
        metadata,
        Column('Section', String(255), nullable=False),
        Column('Key', String(255), nullable=False),
        Column('Value', String, nullable=True),
        PrimaryKeyConstraint('Section', 'Key'),
    )


class DatabaseSettingsStore(SettingsStore):
    """
    Settings store backed by a database table.

    Every operation checks a connection out of the engine immediately
    before use and returns it on every exit path. Writes run inside a
    single transaction: begin, insert, commit, or roll back and re-raise.
    """

    def __init__(self, url_or_engine: Union[str, Engine], table_name: str = DEFAULT_TABLE_NAME):
        super().__init__()
        if isinstance(url_or_engine, str):
            self.engine = create_engine(url_or_engine)
        else:
            self.engine = url_or_engine
        self.table = settings_table(MetaData(), table_name)

    def create_table(self) -> None:
        """Create the settings table if it does not exist yet."""
        self.table.create(self.engine, checkfirst=True)

    def _read_all(self) -> Dict[str, Optional[str]]:
        query = select(self.table.c.Section, self.table.c.Key, self.table.c.Value)
        data = {}
        with self.engine.connect() as conn:
            for section, key, value in conn.execute(query):
                data[make_setting_key(section, key)] = value
        return data

    def _write(self, section: str, key: str, value: Optional[str]) -> None:
        statement = self.table.insert().values(Section=section, Key=key, Value=value)
        with self.engine.connect() as conn:
            # Failures opening the connection or beginning the transaction
            # propagate as-is; there is nothing to roll back yet.
            transaction = conn.begin()
            try:
                conn.execute(statement)
                transaction.commit()
            except Exception as e:
                logger.error(f"Rolling back write of {section}:{key}", extra={
                    'table': self.table.name,
                    'error': str(e),
                    'error_type': type(e).__name__,
                })
                try:
                    transaction.rollback()
                except Exception as rollback_error:
                    # The write error is what the caller needs to see
                    logger.error(f"Rollback of {section}:{key} failed: {rollback_error}", extra={
                        'table': self.table.name,
                        'error_type': type(rollback_error).__name__,
                    })
                raise e

    def count(self) -> int:
        """Number of rows currently in the table."""
        with self.engine.connect() as conn:
            return conn.execute(select(func.count()).select_from(self.table)).scalar_one()

    def dispose(self) -> None:
        """Release pooled connections held by the engine."""
        self.engine.dispose()

    def __repr__(self) -> str:
        return f"DatabaseSettingsStore({self.engine.url.render_as_string(hide_password=True)}, table={self.table.name})"
