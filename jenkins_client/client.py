import logging

import requests

from jenkins_common.config import DEFAULT_HTTP_TIMEOUT, JobsConfig
from jenkins_common.models import JobSnapshot

logger = logging.getLogger(__name__)


class JobFetchError(RuntimeError):
    """Raised when the job list cannot be read from Jenkins."""


def jobs_api_url(jenkins_url: str, api_path: str = "/api/json") -> str:
    """Build the JSON API URL for a Jenkins base URL."""
    return f"{jenkins_url.rstrip('/')}{api_path}"


def get_jobs(
    jenkins_url: str,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
    config: JobsConfig | None = None,
) -> list[JobSnapshot]:
    """
    Get the jobs currently configured on a Jenkins instance.

    Args:
        jenkins_url: Base URL of the Jenkins server (not validated)
        timeout: Seconds to wait for the response
        config: API path and tree filter to use (default: JobsConfig())

    Returns:
        list[JobSnapshot]: Jobs in the order Jenkins reports them

    Raises:
        JobFetchError: If the request fails, the server answers with an error
            status, or the response is not a Jenkins job listing

    Only top-level jobs are returned; folder contents are not expanded.
    """
    config = config or JobsConfig()
    url = jobs_api_url(jenkins_url, config.api_path)
    logger.debug(f"Fetching jobs from {url}")

    try:
        response = requests.get(url, params={"tree": config.tree}, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
        jobs = [JobSnapshot.from_api(item) for item in payload["jobs"]]
    except requests.exceptions.RequestException as e:
        raise JobFetchError(f"Error fetching jobs from {jenkins_url}: {e}") from e
    except (ValueError, KeyError, TypeError) as e:
        raise JobFetchError(
            f"Unexpected response from {jenkins_url}: {e!r}"
        ) from e

    logger.info(f"Fetched {len(jobs)} jobs from {jenkins_url}")
    return jobs
