"""
Oracle database adapter implementation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Sequence

from ..dialects.oracle import OracleDialect
from ..security.redaction import redact_params
from ..utils import get_logger, resolve_slow_query_ms, time_call
from .base import (
    AdapterConfigurationError,
    AdapterConnectionError,
    AdapterExecutionError,
    ConnectionConfig,
    DatabaseAdapter,
)

_STRING_LITERAL_RE = re.compile(r"'(?:[^']|'')*'")
_BIND_RE = re.compile(r"(?<![\w:]):(\d+)\b")


def _load_driver():
    try:
        import oracledb

        return oracledb
    except ImportError:
        return None


@dataclass
class OracleConnectionState:
    connection: Any
    config: ConnectionConfig
    driver: Any


class OracleAdapter(DatabaseAdapter):
    """
    Adapter wrapping the python-oracledb driver (thin mode by default).
    """

    def __init__(self, slow_query_ms: int | None = None) -> None:
        self.dialect = OracleDialect()
        self._state: OracleConnectionState | None = None
        self.logger = get_logger("adapters.oracle")
        self.slow_query_ms = resolve_slow_query_ms(default=100, override=slow_query_ms)

    # ------------------------------------------------------------------ #
    # Connection management
    # ------------------------------------------------------------------ #
    def connect(self, config: ConnectionConfig) -> Any:
        driver = _load_driver()
        if driver is None:
            raise AdapterConfigurationError("oracledb is required to use OracleAdapter.")
        if config.dsn is None:
            config = ConnectionConfig.from_dsn(
                config.url,
                autocommit=config.autocommit,
                timeout=config.timeout,
                options=config.options,
                source=config.source,
            )

        options = dict(config.options or {})
        if config.timeout and "tcp_connect_timeout" not in options:
            options["tcp_connect_timeout"] = float(config.timeout)

        self.logger.info(
            "Connecting to Oracle %s (autocommit=%s)",
            config.descriptive_label(),
            config.autocommit,
        )

        dsn = config.dsn
        try:
            connection = driver.connect(
                user=dsn.username,
                password=dsn.password,
                dsn=dsn.easy_connect(),
                **options,
            )
        except Exception as exc:
            raise AdapterConnectionError("Failed to connect to Oracle.") from exc
        connection.autocommit = bool(config.autocommit)

        self._state = OracleConnectionState(connection, config, driver)
        return connection

    def close(self) -> None:
        if self._state:
            try:
                self._state.connection.close()
            finally:
                self._state = None

    def _ensure_connection(self):
        if not self._state:
            raise AdapterConnectionError("OracleAdapter is not connected.")
        return self._state.connection

    # ------------------------------------------------------------------ #
    # Execution helpers
    # ------------------------------------------------------------------ #
    def execute(self, sql: str, params: Sequence[Any] | None = None):
        connection = self._ensure_connection()
        params = list(params or ())
        self._validate_params(sql, params)
        try:
            cursor = connection.cursor()
        except Exception as exc:
            raise AdapterExecutionError("Could not open an Oracle cursor.") from exc
        with time_call(
            "oracle.execute",
            self.logger,
            sql=sql,
            params=redact_params(params),
            threshold_ms=self.slow_query_ms,
        ):
            try:
                cursor.execute(sql, params)
            except Exception as exc:
                cursor.close()
                raise AdapterExecutionError(f"Oracle rejected statement: {sql}") from exc
        return cursor

    def fetch_value(self, sql: str, params: Sequence[Any] | None = None) -> Any:
        cursor = self.execute(sql, params)
        try:
            row = cursor.fetchone()
        except Exception as exc:
            raise AdapterExecutionError(f"Failed to fetch result of: {sql}") from exc
        finally:
            cursor.close()
        if not row:
            return None
        return row[0]

    @staticmethod
    def _count_binds(sql: str) -> int:
        stripped = _STRING_LITERAL_RE.sub("''", sql)
        return len(set(_BIND_RE.findall(stripped)))

    def _validate_params(self, sql: str, params: Sequence[Any]) -> None:
        bind_count = self._count_binds(sql)
        if bind_count == 0:
            if params:
                raise AdapterExecutionError(
                    "Parameters provided but SQL statement has no bind variables."
                )
            return
        if bind_count != len(params):
            raise AdapterExecutionError(
                f"Parameter count mismatch: expected {bind_count}, received {len(params)}."
            )
