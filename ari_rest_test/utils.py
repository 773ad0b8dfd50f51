#!/usr/bin/env python

import unittest
from urllib.parse import urljoin

import ari_rest
import requests
import responses

from ari_rest.http_client import HttpClient, Response


class AriTestCase(unittest.TestCase):
    """Base class for mock ARI server.
    """

    BASE_URL = "http://ari.py:8088/ari"

    def setUp(self):
        """Setup responses; create ARI client.
        """
        super(AriTestCase, self).setUp()
        self.responses_mock = responses.RequestsMock(
            assert_all_requests_are_fired=True)
        self.responses_mock.start()
        self.uut = ari_rest.connect('http://ari.py:8088/', 'test', 'test')

    def tearDown(self):
        """Cleanup.
        """
        super(AriTestCase, self).tearDown()
        self.responses_mock.stop()
        self.responses_mock.reset()
        self.uut.close()

    @classmethod
    def build_url(cls, *args):
        """Build a URL, based off of BASE_URL, with the given args.

        >>> AriTestCase.build_url('foo', 'bar', 'bam', 'bang')
        'http://ari.py:8088/ari/foo/bar/bam/bang'

        :param args: URL components
        :return: URL
        """
        url = cls.BASE_URL
        for arg in args:
            url = urljoin(url + '/', str(arg))
        return url

    def serve(self, method, *args, **kwargs):
        """Serve a single URL for current test using responses.

        :param method: HTTP method (e.g., responses.GET, responses.POST).
        :param args: URL path segments.
        :param kwargs: See responses.add()
        """
        url = self.build_url(*args)
        if 'body' not in kwargs and 'json' not in kwargs and \
                'status' not in kwargs:
            kwargs['status'] = requests.codes.no_content
        if 'body' in kwargs and 'content_type' not in kwargs:
            kwargs['content_type'] = 'application/json'
        self.responses_mock.add(method, url, **kwargs)

    def last_request(self):
        return self.responses_mock.calls[-1].request


class RecordingHttpClient(HttpClient):
    """Transport which records requests instead of sending them.

    :param response: Response to hand back for every request.
    :type  response: ari_rest.http_client.Response
    """

    def __init__(self, response=None):
        self.response = response or Response(204, "")
        self.requests = []
        self.closed = False

    def request(self, method, url, headers=None, body=None, auth=None,
                timeout=None, proxy=None):
        self.requests.append({
            'method': method,
            'url': url,
            'headers': headers,
            'body': body,
            'auth': auth,
            'timeout': timeout,
            'proxy': proxy,
        })
        return self.response

    def close(self):
        self.closed = True

    @property
    def last(self):
        return self.requests[-1]
