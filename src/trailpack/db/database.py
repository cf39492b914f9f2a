"""Database client — engine, session factory and connectivity checks."""

import json

import boto3
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.engine import URL
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from trailpack.config import Config
from trailpack.db.schemas.base import Base
from trailpack.errors import TrailPackError


class Database:
    def __init__(self, config: Config) -> None:
        self._config = config
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None
        self._secret_cache: dict[str, str] | None = None

    def _get_credentials(self) -> dict[str, str]:
        if self._config.db_secret_arn:
            if self._secret_cache is None:
                client = boto3.client("secretsmanager", region_name=self._config.aws_region)
                secret = client.get_secret_value(SecretId=self._config.db_secret_arn)
                self._secret_cache = json.loads(secret["SecretString"])
            return self._secret_cache
        return {
            "host": self._config.db_host,
            "port": str(self._config.db_port),
            "dbname": self._config.db_name,
            "user": self._config.db_user,
            "password": self._config.db_password,
        }

    def url(self) -> str | URL:
        if self._config.database_url:
            return self._config.database_url
        creds = self._get_credentials()
        return URL.create(
            "postgresql+psycopg",
            username=creds.get("username", creds.get("user", self._config.db_user)),
            password=creds.get("password", self._config.db_password),
            host=creds.get("host", self._config.db_host),
            port=int(creds.get("port", self._config.db_port)),
            database=creds.get("dbname", self._config.db_name),
        )

    def render_url(self, hide_password: bool = False) -> str:
        url = self.url()
        return url if isinstance(url, str) else url.render_as_string(hide_password=hide_password)

    def connect(self) -> None:
        url = self.url()
        kwargs: dict[str, object] = {"echo": self._config.db_echo}
        if str(url).startswith("sqlite"):
            # In-memory SQLite must share one connection across sessions
            kwargs.update(connect_args={"check_same_thread": False}, poolclass=StaticPool)
        else:
            kwargs["pool_pre_ping"] = True
        self._engine = create_engine(url, **kwargs)
        self._session_factory = sessionmaker(self._engine, expire_on_commit=False)

    def disconnect(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
        self._engine = None
        self._session_factory = None

    def _require_engine(self) -> Engine:
        """Return the active engine or raise if not connected."""
        if self._engine is None:
            raise TrailPackError("Database is not connected. Call connect() first.")
        return self._engine

    @property
    def engine(self) -> Engine:
        return self._require_engine()

    @property
    def session_factory(self) -> sessionmaker[Session]:
        self._require_engine()
        assert self._session_factory is not None
        return self._session_factory

    def create_all(self) -> None:
        """Create tables directly from the ORM models. Local development and tests only."""
        Base.metadata.create_all(self._require_engine())

    def health_check(self) -> bool:
        try:
            with self._require_engine().connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception:
            return False

    def __enter__(self) -> "Database":
        self.connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.disconnect()
