#
# Copyright (c) 2013, Digium, Inc.
#

"""Exceptions raised by the ARI REST client.
"""

import json


class ARIError(Exception):
    """Base class for every error raised by this library.
    """


class ResponseError(ARIError):
    """Asterisk answered, but with an error status.

    :param status: HTTP status code.
    :type  status: int
    :param response_body: Raw response body.
    :type  response_body: str
    :param error_info: Decoded error body. If not given, the body is decoded
                       as JSON when possible, otherwise left as None.
    """

    def __init__(self, status, response_body="", error_info=None):
        if isinstance(response_body, str):
            response_body = response_body.strip()
        else:
            response_body = ""
        if error_info is None:
            error_info = decode_error_info(response_body)
        self.status = status
        self.response_body = response_body
        self.error_info = error_info
        super(ResponseError, self).__init__(
            "%s %s" % (status, response_body) if response_body else
            str(status))

    def __repr__(self):
        return "%s(%r, %r)" % (
            self.__class__.__name__, self.status, self.response_body)


class ServerError(ResponseError):
    """5xx response.
    """


class APIError(ResponseError):
    """4xx response; usually a missing resource or a bad parameter.
    """


class TransportError(ARIError):
    """The request never got a response (refused, timed out, DNS...).

    The underlying exception is chained as ``__cause__``.
    """


def decode_error_info(body):
    """Decode an error body, if it happens to be JSON.

    :param body: Response body.
    :type  body: str
    :return: Decoded JSON value, or None.
    """
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError:
        return None
