"""DSN parsing and redaction utilities."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qs, unquote, urlencode, urlparse

from .redaction import redact_query_params

DEFAULT_ORACLE_PORT = 1521


@dataclass
class DSNConfig:
    driver: str
    username: Optional[str]
    password: Optional[str]
    host: Optional[str]
    port: Optional[int]
    service_name: Optional[str]
    query: dict[str, str]

    def easy_connect(self) -> str:
        """
        ``host:port/service`` string accepted by the Oracle driver.
        """
        if not self.host:
            return self.service_name or ""
        port = self.port or DEFAULT_ORACLE_PORT
        connect = f"{self.host}:{port}"
        if self.service_name:
            connect += f"/{self.service_name}"
        return connect

    def redacted(self) -> str:
        """
        Return the DSN with credentials redacted but structure preserved.
        """
        netloc = ""
        if self.username:
            netloc += self.username
            if self.password:
                netloc += ":***"
            netloc += "@"
        if self.host:
            netloc += self.host
        if self.port:
            netloc += f":{self.port}"

        result = f"{self.driver}://{netloc}"
        if self.service_name:
            result += f"/{self.service_name}"
        if self.query:
            result += f"?{urlencode(redact_query_params(self.query))}"
        return result


def parse_dsn(dsn: str) -> DSNConfig:
    parsed = urlparse(dsn)
    query = {k: v[0] for k, v in parse_qs(parsed.query).items()}
    return DSNConfig(
        driver=parsed.scheme,
        username=unquote(parsed.username) if parsed.username else None,
        password=unquote(parsed.password) if parsed.password else None,
        host=parsed.hostname,
        port=parsed.port,
        service_name=parsed.path.lstrip("/") or None,
        query=query,
    )


def dsn_from_env(env_var: str) -> DSNConfig:
    value = os.getenv(env_var)
    if not value:
        raise ValueError(f"Environment variable {env_var} is not set")
    return parse_dsn(value)
