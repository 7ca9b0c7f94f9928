"""
Tests for the PostgREST client: query parameters and error mapping.
The HTTP session is a mock; no network access happens.
"""

from unittest.mock import MagicMock

import pytest
import requests

from factories import make_settings
from student_dashboard.data.client import BackendError, SupabaseClient


def _response(payload=None, status=200, json_error=False):
    response = MagicMock(spec=requests.Response)
    response.status_code = status
    if json_error:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = payload
    if status >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status} Error", response=response
        )
    return response


@pytest.fixture
def session():
    session = MagicMock()
    session.headers = {}
    return session


@pytest.fixture
def client(session):
    return SupabaseClient("https://demo.supabase.co/", "anon-key", timeout=5, session=session)


class TestBuildParams:
    def test_select_only(self):
        assert SupabaseClient.build_params() == {"select": "*"}

    def test_equality_membership_and_limit(self):
        params = SupabaseClient.build_params(
            "id,name",
            eq={"role": "student"},
            in_={"student_id": ["a1", "b2"]},
            limit=1,
        )
        assert params == {
            "select": "id,name",
            "role": "eq.student",
            "student_id": 'in.("a1","b2")',
            "limit": "1",
        }

    def test_membership_values_are_quoted_and_escaped(self):
        params = SupabaseClient.build_params(in_={"name": ['a,b', 'say "hi"']})
        assert params["name"] == 'in.("a,b","say \\"hi\\"")'


class TestSelect:
    def test_sets_auth_headers(self, client, session):
        assert session.headers["apikey"] == "anon-key"
        assert session.headers["Authorization"] == "Bearer anon-key"

    def test_issues_get_against_rest_endpoint(self, client, session):
        session.get.return_value = _response([{"id": "s1"}])
        rows = client.select("users", "id", eq={"role": "student"})

        assert rows == [{"id": "s1"}]
        session.get.assert_called_once_with(
            "https://demo.supabase.co/rest/v1/users",
            params={"select": "id", "role": "eq.student"},
            timeout=5,
        )

    def test_http_error_uses_backend_message(self, client, session):
        session.get.return_value = _response({"message": "permission denied for table users"}, status=401)
        with pytest.raises(BackendError, match="permission denied for table users"):
            client.select("users")

    def test_http_error_keeps_backend_code(self, client, session):
        session.get.return_value = _response(
            {"code": "22P02", "message": 'invalid input syntax for type uuid: "abc"'}, status=400
        )
        with pytest.raises(BackendError) as excinfo:
            client.select("users", eq={"id": "abc"})
        assert excinfo.value.code == "22P02"

    def test_connection_error_has_no_code(self, client, session):
        session.get.side_effect = requests.exceptions.ConnectionError("refused")
        with pytest.raises(BackendError) as excinfo:
            client.select("users")
        assert excinfo.value.code is None

    def test_http_error_without_message_reports_status(self, client, session):
        session.get.return_value = _response(status=503, json_error=True)
        with pytest.raises(BackendError, match="HTTP 503"):
            client.select("users")

    def test_connection_error(self, client, session):
        session.get.side_effect = requests.exceptions.ConnectionError("refused")
        with pytest.raises(BackendError, match="Could not reach the backend"):
            client.select("users")

    def test_invalid_json(self, client, session):
        session.get.return_value = _response(json_error=True)
        with pytest.raises(BackendError, match="invalid JSON"):
            client.select("credentials")

    def test_non_list_payload(self, client, session):
        session.get.return_value = _response({"id": "s1"})
        with pytest.raises(BackendError, match="Unexpected response shape"):
            client.select("users")

    def test_backend_error_chains_cause(self, client, session):
        session.get.side_effect = requests.exceptions.Timeout("slow")
        with pytest.raises(BackendError) as excinfo:
            client.select("users")
        assert isinstance(excinfo.value.__cause__, requests.exceptions.Timeout)


class TestFromSettings:
    def test_uses_settings_values(self):
        client = SupabaseClient.from_settings(make_settings(url="https://x.supabase.co", timeout=2.5))
        assert client.base_url == "https://x.supabase.co/rest/v1"
        assert client.timeout == 2.5
        assert client.session.headers["apikey"] == "anon-key"
