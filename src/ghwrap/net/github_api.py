from __future__ import annotations

"""Hosting API client: the three repository calls the rewrite rules need."""

import json
import logging
from http import HTTPStatus
from typing import Callable, Optional
from urllib.parse import quote

from ghwrap.core.errors import ApiError, ContextUnavailable
from ghwrap.core.interfaces.net import HostingApiProtocol, HTTPTransportProtocol
from ghwrap.core.models import FetchRequest, FetchResponse
from ghwrap.logging.helpers import get_logger


def _reason(resp: FetchResponse) -> str:
    try:
        message = json.loads(resp.body.decode('utf-8')).get('message')
    except (ValueError, AttributeError, UnicodeDecodeError):
        message = None
    if message:
        return str(message)
    try:
        return HTTPStatus(resp.status).phrase
    except ValueError:
        return 'Unknown error'


class GitHubApiClient(HostingApiProtocol):
    def __init__(
        self,
        transport: HTTPTransportProtocol,
        *,
        base_url: str,
        token_provider: Callable[[], Optional[str]] = lambda: None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._transport = transport
        self._base = base_url.rstrip('/')
        self._token = token_provider
        self._log = logger or get_logger('api')

    def _send(self, method: str, path: str, payload: Optional[dict] = None, *, auth: bool = False) -> FetchResponse:
        headers = {'Accept': 'application/vnd.github+json'}
        if auth:
            token = self._token()
            if not token:
                raise ContextUnavailable(
                    'Set the API token with: git config --global github.token TOKEN'
                )
            headers['Authorization'] = f'token {token}'
        body = None
        if payload is not None:
            body = json.dumps(payload).encode('utf-8')
            headers['Content-Type'] = 'application/json'
        url = f'{self._base}{path}'
        self._log.debug('%s %s', method, url)
        return self._transport.request(FetchRequest(method=method, url=url, headers=headers, body=body))

    @staticmethod
    def _check(resp: FetchResponse) -> FetchResponse:
        if not 200 <= resp.status < 300:
            raise ApiError(resp.status, _reason(resp))
        return resp

    def repo_exists(self, user: str, repo: str) -> bool:
        resp = self._send('GET', f'/repos/{quote(user)}/{quote(repo)}')
        if resp.status == 404:
            return False
        self._check(resp)
        return True

    def fork_repo(self, owner: str, repo: str) -> None:
        self._check(self._send('POST', f'/repos/{quote(owner)}/{quote(repo)}/forks', {}, auth=True))

    def create_repo(
        self,
        name: str,
        *,
        private: bool = False,
        description: Optional[str] = None,
        homepage: Optional[str] = None,
    ) -> None:
        payload = {'name': name, 'private': bool(private)}
        if description:
            payload['description'] = description
        if homepage:
            payload['homepage'] = homepage
        self._check(self._send('POST', '/user/repos', payload, auth=True))
