#
# Copyright (c) 2013, Digium, Inc.
#

"""HTTP transports for the ARI REST client.

The client only depends on the HttpClient interface; RequestsHttpClient is
the default implementation, built on requests.
"""

import logging

import requests
from requests.auth import HTTPBasicAuth
from requests.structures import CaseInsensitiveDict

from ari_rest.error import TransportError

log = logging.getLogger(__name__)


class Response(object):
    """A raw HTTP response.

    :param status: HTTP status code.
    :type  status: int
    :param body: Response body.
    :type  body: str
    :param headers: Response headers; looked up case-insensitively.
    """

    def __init__(self, status, body, headers=None):
        self.status = int(status)
        self.body = body if body is not None else ""
        self.headers = CaseInsensitiveDict(headers or {})

    def __repr__(self):
        return "Response(%d)" % self.status

    @property
    def content_type(self):
        return self.headers.get("Content-Type") or ""


class HttpClient(object):
    """Interface for issuing a single HTTP request.
    """

    def request(self, method, url, headers=None, body=None, auth=None,
                timeout=None, proxy=None):
        """Issue a request and wait for the response.

        Implementations raise TransportError when no response is received.

        :param method: HTTP verb (GET, POST, PUT, DELETE).
        :param url: Absolute URL, query string included.
        :param headers: Request headers.
        :type  headers: dict
        :param body: Encoded request body, or None.
        :type  body: str
        :param auth: Basic auth credentials, or None.
        :type  auth: (str, str)
        :param timeout: Connect and read timeout, in seconds.
        :type  timeout: float
        :param proxy: Proxy URL, credentials included if needed.
        :type  proxy: str
        :rtype: Response
        """
        raise NotImplementedError("Not implemented")

    def close(self):
        """Release any resources held by this transport.
        """


class RequestsHttpClient(HttpClient):
    """HttpClient backed by a requests.Session.

    :param session: Session to use; a new one is created if not given.
    :type  session: requests.Session
    """

    def __init__(self, session=None):
        self.session = session or requests.Session()

    def request(self, method, url, headers=None, body=None, auth=None,
                timeout=None, proxy=None):
        kwargs = {}
        if auth is not None:
            kwargs['auth'] = HTTPBasicAuth(*auth)
        if timeout is not None:
            kwargs['timeout'] = (timeout, timeout)
        if proxy:
            kwargs['proxies'] = {'http': proxy, 'https': proxy}
        try:
            resp = self.session.request(
                method, url, headers=headers, data=body, **kwargs)
        except requests.RequestException as e:
            log.warning("%s %s failed: %s", method, url, e)
            raise TransportError(str(e)) from e
        return Response(resp.status_code, resp.text, resp.headers)

    def close(self):
        self.session.close()
