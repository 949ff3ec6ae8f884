from __future__ import annotations

import json
import unittest
import urllib.error
from email.message import Message
from io import BytesIO
from unittest.mock import patch

from ghwrap.core.errors import ApiError, ContextUnavailable
from ghwrap.core.models import FetchRequest, FetchResponse
from ghwrap.net.github_api import GitHubApiClient
from ghwrap.net.urllib_transport import UrllibHTTPTransport


class _Transport:
    def __init__(self, *responses: FetchResponse) -> None:
        self.responses = list(responses)
        self.requests = []

    def request(self, req: FetchRequest) -> FetchResponse:
        self.requests.append(req)
        return self.responses.pop(0)


def _resp(status: int, body: dict | None = None) -> FetchResponse:
    return FetchResponse(status=status, headers={}, body=json.dumps(body or {}).encode(), final_url="")


class GitHubApiClientTests(unittest.TestCase):
    def _client(self, *responses, token="abc"):
        transport = _Transport(*responses)
        return GitHubApiClient(transport, base_url="https://api.github.com/", token_provider=lambda: token), transport

    def test_repo_exists(self) -> None:
        client, transport = self._client(_resp(200), _resp(404))
        self.assertTrue(client.repo_exists("defunkt", "hub"))
        self.assertFalse(client.repo_exists("nobody", "hub"))
        self.assertEqual(transport.requests[0].url, "https://api.github.com/repos/defunkt/hub")
        self.assertNotIn("Authorization", transport.requests[0].headers)

    def test_repo_exists_server_error_raises(self) -> None:
        client, _ = self._client(_resp(502))
        with self.assertRaises(ApiError) as cm:
            client.repo_exists("a", "b")
        self.assertEqual((cm.exception.status, cm.exception.reason), (502, "Bad Gateway"))

    def test_fork_sends_token(self) -> None:
        client, transport = self._client(_resp(202))
        client.fork_repo("defunkt", "hub")
        req = transport.requests[0]
        self.assertEqual((req.method, req.url), ("POST", "https://api.github.com/repos/defunkt/hub/forks"))
        self.assertEqual(req.headers["Authorization"], "token abc")

    def test_create_payload(self) -> None:
        client, transport = self._client(_resp(201))
        client.create_repo("hub", private=True, description="d")
        payload = json.loads(transport.requests[0].body)
        self.assertEqual(payload, {"name": "hub", "private": True, "description": "d"})

    def test_error_message_from_body(self) -> None:
        client, _ = self._client(_resp(422, {"message": "name already exists"}))
        with self.assertRaises(ApiError) as cm:
            client.create_repo("hub")
        self.assertEqual(str(cm.exception), "name already exists (HTTP 422)")

    def test_missing_token(self) -> None:
        client, transport = self._client(_resp(202), token=None)
        with self.assertRaises(ContextUnavailable):
            client.fork_repo("a", "b")
        self.assertEqual(transport.requests, [])


class UrllibTransportTests(unittest.TestCase):
    def test_http_error_returned_as_response(self) -> None:
        err = urllib.error.HTTPError("https://api.github.com/x", 404, "Not Found", Message(), BytesIO(b"{}"))
        with patch("ghwrap.net.urllib_transport.urllib.request.urlopen", side_effect=err):
            resp = UrllibHTTPTransport(user_agent="ghwrap/test").request(
                FetchRequest(method="GET", url="https://api.github.com/x")
            )
        self.assertEqual(resp.status, 404)
        self.assertEqual(resp.body, b"{}")

    def test_user_agent_added(self) -> None:
        class _Resp:
            status = 200
            headers = Message()

            def read(self):
                return b"ok"

            def geturl(self):
                return "https://api.github.com/x"

            def __enter__(self):
                return self

            def __exit__(self, *exc):
                return False

        with patch("ghwrap.net.urllib_transport.urllib.request.urlopen", return_value=_Resp()) as urlopen:
            resp = UrllibHTTPTransport(user_agent="ghwrap/test").request(
                FetchRequest(method="GET", url="https://api.github.com/x")
            )
        sent = urlopen.call_args.args[0]
        self.assertEqual(sent.get_header("User-agent"), "ghwrap/test")
        self.assertEqual((resp.status, resp.body), (200, b"ok"))


if __name__ == "__main__":
    unittest.main()
