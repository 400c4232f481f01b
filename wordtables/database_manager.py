#!/usr/bin/env python3
"""PostgreSQL connection manager with pooling."""

from typing import Optional, Dict, Any
import logging
from contextlib import contextmanager

from psycopg import sql
from psycopg_pool import ConnectionPool

from .secure_config import DatabaseConfig, get_database_config

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    Database connection manager with connection pooling
    Every connection handed out runs in one transaction that is committed
    on success and rolled back on any error
    """

    def __init__(self, config: Optional[DatabaseConfig] = None, schema: Optional[str] = None):
        """Initialize database manager with connection pool"""
        self.config_obj = config or get_database_config()
        self.schema = schema or self.config_obj.schema
        self.pool: Optional[ConnectionPool] = None
        self._initialized = False
        self.setup_connection_pool()

    def setup_connection_pool(self):
        """Setup PostgreSQL connection pool"""
        try:
            conninfo = self.config_obj.get_connection_string(hide_password=False)
            max_size = self.config_obj.pool_size or 1
            self.pool = ConnectionPool(
                conninfo=conninfo,
                min_size=1,
                max_size=max_size,
                timeout=self.config_obj.timeout,
                name="word_tables_pool",
                open=True,
            )
            self._initialized = True
            logger.info(f"Database connection pool initialized for "
                        f"{self.config_obj.get_connection_string()}")

        except Exception as exc:
            logger.error(f"Failed to create PostgreSQL connection pool: {exc}")
            raise

    def search_path_statement(self) -> sql.Composed:
        """SET search_path with the schema quoted as an identifier"""
        return sql.SQL("SET search_path TO {}").format(sql.Identifier(self.schema))

    @contextmanager
    def get_connection(self):
        """
        Get a database connection from the pool

        Yields:
            Database connection inside one transaction, committed when the
            block completes and rolled back when it raises

        Example:
            with db_manager.get_connection() as conn:
                conn.execute("SELECT COUNT(*) FROM words5")
        """
        if not self.pool:
            raise RuntimeError("Database connection pool is not initialized")

        with self.pool.connection() as connection:
            connection.autocommit = False
            try:
                if self.schema:
                    connection.execute(self.search_path_statement(), prepare=False)
                yield connection
                connection.commit()
            except Exception:
                connection.rollback()
                raise

    @contextmanager
    def get_cursor(self):
        """
        Get a database cursor (convenience method)

        Yields:
            Database cursor wrapper that disables prepared statements

        Example:
            with db_manager.get_cursor() as cursor:
                cursor.execute("SELECT score FROM words5 WHERE word = %s", ("слово",))
                result = cursor.fetchone()
        """
        with self.get_connection() as conn:
            with conn.cursor() as real_cursor:
                yield CursorWrapper(real_cursor)

    def get_connection_info(self) -> Dict[str, Any]:
        """Get information about the database connection (without password)"""
        return {
            'host': self.config_obj.host,
            'port': self.config_obj.port,
            'database': self.config_obj.database,
            'schema': self.schema,
            'user': self.config_obj.user,
            'initialized': self._initialized,
        }

    def close_pool(self):
        """Close the connection pool"""
        if self.pool:
            self.pool.close()
            self.pool = None
            self._initialized = False
            logger.info("Database connection pool closed")

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close_pool()


class CursorWrapper:
    """
    Wrapper around psycopg cursor that disables prepared statements by default.
    Prevents "prepared statement already exists" errors behind poolers.
    """

    def __init__(self, cursor):
        self._cursor = cursor

    def execute(self, query, params=None, **kwargs):
        """Execute with prepare=False by default"""
        kwargs.setdefault('prepare', False)
        return self._cursor.execute(query, params, **kwargs)

    def executemany(self, query, params_seq, **kwargs):
        """Execute a statement for each parameter set"""
        kwargs.pop('prepare', None)
        return self._cursor.executemany(query, params_seq, **kwargs)

    # Delegate all other methods/attributes to the real cursor
    def __getattr__(self, name):
        return getattr(self._cursor, name)
