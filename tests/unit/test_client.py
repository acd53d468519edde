"""
Unit tests for jenkins_client.client module.

Tests the Jenkins job listing call with requests mocked out.
"""

from unittest.mock import Mock, patch

import pytest
import requests

from jenkins_client.client import JobFetchError, get_jobs, jobs_api_url


def make_response(payload=None, json_error=None, status_error=None):
    response = Mock()
    if status_error:
        response.raise_for_status.side_effect = status_error
    else:
        response.raise_for_status = Mock()
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


class TestJobsApiUrl:
    def test_appends_api_path(self):
        assert jobs_api_url("http://ci:8080") == "http://ci:8080/api/json"

    def test_strips_trailing_slash(self):
        assert jobs_api_url("http://ci:8080/jenkins/") == "http://ci:8080/jenkins/api/json"


class TestGetJobs:
    """Test suite for get_jobs function."""

    @patch("jenkins_client.client.requests.get")
    def test_returns_jobs_in_server_order(self, mock_get):
        mock_get.return_value = make_response(
            {
                "_class": "hudson.model.Hudson",
                "jobs": [
                    {"name": "build-b", "color": "red"},
                    {"name": "build-a", "color": "blue"},
                ],
            }
        )

        jobs = get_jobs("http://ci:8080/")

        assert [(j.name, j.status) for j in jobs] == [
            ("build-b", "red"),
            ("build-a", "blue"),
        ]
        args, kwargs = mock_get.call_args
        assert args[0] == "http://ci:8080/api/json"
        assert kwargs["params"] == {"tree": "jobs[name,color]"}
        assert kwargs["timeout"] == 30.0

    @patch("jenkins_client.client.requests.get")
    def test_passes_timeout(self, mock_get):
        mock_get.return_value = make_response({"jobs": []})

        assert get_jobs("http://ci", timeout=2.5) == []
        assert mock_get.call_args.kwargs["timeout"] == 2.5

    @patch("jenkins_client.client.requests.get")
    def test_connection_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("Connection refused")

        with pytest.raises(JobFetchError) as exc_info:
            get_jobs("http://nowhere:8080")

        assert "Connection refused" in str(exc_info.value)
        assert "http://nowhere:8080" in str(exc_info.value)

    @patch("jenkins_client.client.requests.get")
    def test_http_error(self, mock_get):
        mock_get.return_value = make_response(
            status_error=requests.exceptions.HTTPError("404 Client Error: Not Found")
        )

        with pytest.raises(JobFetchError, match="404"):
            get_jobs("http://ci:8080")

    @patch("jenkins_client.client.requests.get")
    def test_invalid_json(self, mock_get):
        mock_get.return_value = make_response(json_error=ValueError("Expecting value"))

        with pytest.raises(JobFetchError, match="Expecting value"):
            get_jobs("http://ci:8080")

    @patch("jenkins_client.client.requests.get")
    def test_response_without_jobs(self, mock_get):
        mock_get.return_value = make_response({"mode": "NORMAL"})

        with pytest.raises(JobFetchError, match="Unexpected response"):
            get_jobs("http://ci:8080")

    @patch("jenkins_client.client.requests.get")
    def test_response_not_an_object(self, mock_get):
        mock_get.return_value = make_response(["not", "a", "listing"])

        with pytest.raises(JobFetchError):
            get_jobs("http://ci:8080")

    def test_is_runtime_error(self):
        assert issubclass(JobFetchError, RuntimeError)
