from ghwrap.net.github_api import GitHubApiClient
from ghwrap.net.urllib_transport import UrllibHTTPTransport

__all__ = ['GitHubApiClient', 'UrllibHTTPTransport']
