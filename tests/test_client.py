"""
tests/test_client.py - Release service client tests.

Uses httpx.MockTransport in place of a running release service.
"""

import base64
import json

import httpx
import pytest

from rudder.client import ReleaseClient, base_url, INSTALL_PATH
from rudder.errors import ReleaseServiceError
from rudder.release import InstallRequest, Status


RELEASE_JSON = {
    "name": "my-app",
    "info": {
        "lastDeployed": "2016-04-20T18:32:05Z",
        "status": {"code": "DEPLOYED"},
    },
    "chart": {"metadata": {"name": "nginx", "version": "1.2.3"}},
    "manifest": "kind: Pod",
}


def _client(handler, host=":44134"):
    return ReleaseClient(host, transport=httpx.MockTransport(handler))


class TestBaseUrl:
    def test_port_only(self):
        assert base_url(":44134") == "http://localhost:44134"

    def test_host_port(self):
        assert base_url("tiller.internal:44134") == "http://tiller.internal:44134"

    def test_scheme_kept(self):
        assert base_url("https://tiller.example.com/") == "https://tiller.example.com"


class TestInstall:
    def test_request_body(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["method"] = request.method
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"release": RELEASE_JSON})

        resp = _client(handler).install_release(
            InstallRequest(chart="./nginx", values=b"a = 1\n", dry_run=True),
        )

        assert seen["method"] == "POST"
        assert seen["url"] == f"http://localhost:44134{INSTALL_PATH}"
        assert seen["body"]["chart"] == "./nginx"
        assert seen["body"]["dryRun"] is True
        assert base64.b64decode(seen["body"]["values"]["raw"]) == b"a = 1\n"
        assert resp.release.name == "my-app"
        assert resp.release.info.status is Status.DEPLOYED
        assert resp.release.chart.version == "1.2.3"

    def test_empty_values(self):
        seen = {}

        def handler(request):
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"release": None})

        resp = _client(handler).install_release(InstallRequest(chart="nginx"))
        assert seen["body"]["values"]["raw"] == ""
        assert resp.release is None

    def test_service_error(self):
        def handler(request):
            return httpx.Response(404, json={
                "error": {"code": "NotFound", "message": "chart nginx not found"},
            })

        with pytest.raises(ReleaseServiceError) as exc:
            _client(handler).install_release(InstallRequest(chart="nginx"))
        assert exc.value.code == "NotFound"
        assert exc.value.message == "chart nginx not found"

    def test_plain_text_error(self):
        def handler(request):
            return httpx.Response(500, text="rpc error: code = 2 desc = boom")

        with pytest.raises(ReleaseServiceError) as exc:
            _client(handler).install_release(InstallRequest(chart="nginx"))
        assert exc.value.code == "500"
        assert "boom" in exc.value.message

    def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ReleaseServiceError, match="cannot reach") as exc:
            _client(handler).install_release(InstallRequest(chart="nginx"))
        assert isinstance(exc.value.__cause__, httpx.ConnectError)

    def test_malformed_body(self):
        def handler(request):
            return httpx.Response(200, text="not json")

        with pytest.raises(ReleaseServiceError, match="malformed"):
            _client(handler).install_release(InstallRequest(chart="nginx"))

    @pytest.mark.parametrize("body", [
        {"release": "oops"},
        {"release": {}},
        {"release": {"name": None}},
        {"release": {"name": "my-app", "info": "DEPLOYED"}},
        {"release": {"name": "my-app", "chart": {"metadata": []}}},
        {"release": {"name": "my-app", "info": {"lastDeployed": "yesterday"}}},
    ])
    def test_malformed_release(self, body):
        def handler(request):
            return httpx.Response(200, json=body)

        with pytest.raises(ReleaseServiceError, match="malformed"):
            _client(handler).install_release(InstallRequest(chart="nginx"))

    def test_null_fields_become_empty(self):
        def handler(request):
            return httpx.Response(200, json={"release": {
                "name": "my-app",
                "manifest": None,
                "chart": {"metadata": {"name": None, "version": None}},
            }})

        rel = _client(handler).install_release(InstallRequest(chart="nginx")).release
        assert rel.name == "my-app"
        assert rel.manifest == ""
        assert rel.chart.name == ""
        assert rel.chart.version == ""
