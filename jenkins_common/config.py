"""
Runtime configuration for the job snapshot command.

Values are read once from the environment into an immutable JobsConfig that
is handed to the fetcher, the store and the CLI.

Environment Variables:
    JENKINS_JOBS_DB: Default database file (default: jobs.sqlite)
    JENKINS_JOBS_TIMEOUT: Seconds to wait for Jenkins (default: 30.0)
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_DB_NAME = "jobs.sqlite"
DEFAULT_HTTP_TIMEOUT = 30.0

CREATE_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS jobs (
        id INTEGER PRIMARY KEY,
        name TEXT,
        status TEXT,
        checked_at INTEGER
    )
"""

INSERT_JOB_SQL = "INSERT INTO jobs (name, status, checked_at) VALUES (?, ?, ?)"


@dataclass(frozen=True)
class JobsConfig:
    default_db_name: str = DEFAULT_DB_NAME
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    api_path: str = "/api/json"
    tree: str = "jobs[name,color]"
    create_table_sql: str = CREATE_TABLE_SQL
    insert_job_sql: str = INSERT_JOB_SQL


def get_http_timeout(environ: Mapping[str, str]) -> float:
    """
    Get the Jenkins request timeout from the environment.

    Returns:
        Seconds to wait for Jenkins, falling back to the default on bad input
    """
    raw = environ.get("JENKINS_JOBS_TIMEOUT")
    if raw is None:
        return DEFAULT_HTTP_TIMEOUT

    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(
            f"Invalid JENKINS_JOBS_TIMEOUT={raw}, using default {DEFAULT_HTTP_TIMEOUT}"
        )
        return DEFAULT_HTTP_TIMEOUT

    if timeout <= 0:
        logger.warning(
            f"Invalid JENKINS_JOBS_TIMEOUT={timeout}, using default {DEFAULT_HTTP_TIMEOUT}"
        )
        return DEFAULT_HTTP_TIMEOUT
    return timeout


def load_config(environ: Mapping[str, str] | None = None) -> JobsConfig:
    """
    Build the configuration from environment variables.

    Args:
        environ: Mapping to read from (default: os.environ)
    """
    if environ is None:
        environ = os.environ

    return JobsConfig(
        default_db_name=environ.get("JENKINS_JOBS_DB") or DEFAULT_DB_NAME,
        http_timeout=get_http_timeout(environ),
    )
