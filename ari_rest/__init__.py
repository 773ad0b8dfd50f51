#
# Copyright (c) 2013, Digium, Inc.
#

"""ARI REST client library
"""

from urllib.parse import urlsplit

from ari_rest.client import Client
from ari_rest.config import ClientConfig
from ari_rest.error import (
    ARIError, APIError, ResponseError, ServerError, TransportError)
from ari_rest.http_client import HttpClient, RequestsHttpClient, Response


def connect(base_url, username, password, **options):
    """Helper method for easily connecting to ARI.

    Host, port and prefix are taken from the URL. As with Client, HTTPS is
    only used when the port is 443.

    :param base_url: Base URL for Asterisk HTTP server (http://localhost:8088/)
    :param username: ARI username
    :param password: ARI password.
    :param options: Further Client options (proxy, timeout, http_client).
    :return: ARI client.
    :rtype: ari_rest.client.Client
    """
    split = urlsplit(base_url)
    port = split.port or (443 if split.scheme == 'https' else 80)
    segments = [s for s in split.path.split('/') if s]
    # http://host:8088/ari/ means the same as http://host:8088/
    if segments and segments[-1] == 'ari':
        segments.pop()
    prefix = '/'.join(segments) or None
    return Client(host=split.hostname, port=port, prefix=prefix,
                  username=username, password=password, **options)
