#!/usr/bin/env python

"""Request encoding and response decoding, checked through a recording
transport.
"""

import json
import unittest
from urllib.parse import parse_qs, unquote_plus, urlsplit

from ari_rest import APIError, Client, ServerError
from ari_rest.client import decode_body, encode_params
from ari_rest.http_client import Response
from ari_rest_test.utils import RecordingHttpClient


# noinspection PyDocstring
class PathTest(unittest.TestCase):
    def setUp(self):
        self.transport = RecordingHttpClient()

    def client(self, **options):
        return Client(http_client=self.transport, **options)

    def test_default_root(self):
        self.client().get('channels')
        self.assertEqual('http://localhost:8088/ari/channels',
                         self.transport.last['url'])

    def test_prefix(self):
        for prefix in ('asterisk', '/asterisk', 'asterisk/'):
            self.client(prefix=prefix).bridges.list()
            self.assertEqual('http://localhost:8088/asterisk/ari/bridges',
                             self.transport.last['url'])

    def test_nested_prefix(self):
        self.client(host='pbx', port=80, prefix='a/b').bridges.get('b1')
        self.assertEqual('http://pbx:80/a/b/ari/bridges/b1',
                         self.transport.last['url'])

    def test_absolute_path(self):
        client = self.client(prefix='pbx1')
        client.get('/ari/api-docs/resources.json')
        self.assertEqual(
            'http://localhost:8088/pbx1/ari/api-docs/resources.json',
            self.transport.last['url'])
        self.client().get('/httpstatus')
        self.assertEqual('http://localhost:8088/httpstatus',
                         self.transport.last['url'])

    def test_ipv6_host(self):
        self.client(host='::1').channels.list()
        self.assertEqual('http://[::1]:8088/ari/channels',
                         self.transport.last['url'])
        self.client(host='[fe80::1]', port=443).channels.list()
        self.assertEqual('https://[fe80::1]:443/ari/channels',
                         self.transport.last['url'])

    def test_https_on_443(self):
        self.client(host='pbx.example.com', port=443).channels.list()
        self.assertEqual('https://pbx.example.com:443/ari/channels',
                         self.transport.last['url'])

    def test_identifiers_are_escaped(self):
        self.client().endpoints.get('PJSIP', 'alice bob')
        self.assertEqual('http://localhost:8088/ari/endpoints/PJSIP/alice%20bob',
                         self.transport.last['url'])
        self.client().playbacks.get('a/b')
        self.assertEqual('http://localhost:8088/ari/playbacks/a%2Fb',
                         self.transport.last['url'])


# noinspection PyDocstring
class EncodingTest(unittest.TestCase):
    def setUp(self):
        self.transport = RecordingHttpClient()
        self.uut = Client(http_client=self.transport)

    def test_get_has_no_body(self):
        self.uut.get('channels/1/variable', {'variable': 'CALLERID(num)'})
        request = self.transport.last
        self.assertEqual('GET', request['method'])
        self.assertIsNone(request['body'])
        self.assertNotIn('Content-Type', request['headers'])
        self.assertEqual('variable=CALLERID%28num%29',
                         urlsplit(request['url']).query)

    def test_get_without_params(self):
        self.uut.get('channels')
        self.assertNotIn('?', self.transport.last['url'])

    def test_get_json_encodes_structured_values(self):
        variables = {"CALLERID(name)": "Alice"}
        self.uut.get('test', {'variables': variables})
        query = urlsplit(self.transport.last['url']).query
        name, value = query.split('=', 1)
        self.assertEqual('variables', name)
        self.assertEqual(json.dumps(variables), unquote_plus(value))

    def test_get_scalars(self):
        self.uut.get('sounds', {'lang': 'en', 'beep': True, 'count': 3})
        query = parse_qs(urlsplit(self.transport.last['url']).query)
        self.assertEqual({'lang': ['en'], 'beep': ['true'], 'count': ['3']},
                         query)

    def test_mutating_verbs_use_form_body(self):
        for verb in ('post', 'put', 'delete'):
            getattr(self.uut, verb)('things', {'a': 'b c', 'd': 1})
            request = self.transport.last
            self.assertEqual(verb.upper(), request['method'])
            self.assertEqual('http://localhost:8088/ari/things',
                             request['url'])
            self.assertEqual('a=b+c&d=1', request['body'])
            self.assertEqual('application/x-www-form-urlencoded',
                             request['headers']['Content-Type'])

    def test_mutating_verbs_without_params(self):
        for verb in ('post', 'put', 'delete'):
            getattr(self.uut, verb)('things')
            self.assertIsNone(self.transport.last['body'])

    def test_none_values_are_left_out(self):
        self.assertEqual('a=1', encode_params({'a': '1', 'b': None}))
        self.assertEqual('', encode_params(None))
        self.assertEqual('', encode_params({}))

    def test_nested_value_in_body(self):
        self.uut.channels.originate(endpoint='PJSIP/100',
                                    variables={'FOO': 'bar'})
        form = parse_qs(self.transport.last['body'])
        self.assertEqual({'FOO': 'bar'}, json.loads(form['variables'][0]))

    def test_lowercase_verb(self):
        self.uut.call('post', 'things')
        self.assertEqual('POST', self.transport.last['method'])


# noinspection PyDocstring
class TransportOptionsTest(unittest.TestCase):
    def test_auth_and_proxy_on_every_verb(self):
        transport = RecordingHttpClient()
        uut = Client(http_client=transport, username='u', password='p',
                     proxy='http://pu:pp@proxy:3128', timeout=2.5)
        for verb in ('get', 'post', 'put', 'delete'):
            getattr(uut, verb)('x', {'k': 'v'})
            request = transport.last
            self.assertEqual(('u', 'p'), request['auth'])
            self.assertNotIn('Authorization', request['headers'])
            self.assertEqual('http://pu:pp@proxy:3128', request['proxy'])
            self.assertEqual(2.5, request['timeout'])

    def test_no_auth_without_password(self):
        transport = RecordingHttpClient()
        Client(http_client=transport, username='u').get('x')
        self.assertIsNone(transport.last['auth'])
        self.assertIsNone(transport.last['proxy'])
        self.assertIsNone(transport.last['timeout'])

    def test_close(self):
        transport = RecordingHttpClient()
        Client(http_client=transport).close()
        self.assertTrue(transport.closed)


# noinspection PyDocstring
class ResponseTest(unittest.TestCase):
    def call(self, response, **kwargs):
        uut = Client(http_client=RecordingHttpClient(response))
        return uut.call('GET', 'x', **kwargs)

    def test_server_error(self):
        with self.assertRaises(ServerError) as cm:
            self.call(Response(500, 'boom'))
        self.assertEqual(500, cm.exception.status)
        self.assertEqual('boom', cm.exception.response_body)
        self.assertIsNone(cm.exception.error_info)

    def test_api_error(self):
        with self.assertRaises(APIError) as cm:
            self.call(Response(404, '{"message":"not found"}',
                               {'Content-Type': 'application/json'}))
        self.assertEqual(404, cm.exception.status)
        self.assertEqual({'message': 'not found'}, cm.exception.error_info)

    def test_api_error_without_json(self):
        with self.assertRaises(APIError) as cm:
            self.call(Response(422, 'Unprocessable'))
        self.assertEqual('Unprocessable', cm.exception.response_body)
        self.assertIsNone(cm.exception.error_info)

    def test_boundaries(self):
        with self.assertRaises(APIError):
            self.call(Response(400, ''))
        with self.assertRaises(APIError):
            self.call(Response(499, ''))
        with self.assertRaises(ServerError):
            self.call(Response(503, ''))
        self.assertEqual('moved', self.call(Response(302, 'moved')))

    def test_json_list(self):
        self.assertEqual([], self.call(
            Response(200, '[]', {'Content-Type': 'application/json'})))

    def test_content_type_lookup_ignores_case(self):
        self.assertEqual({'a': 1}, self.call(
            Response(200, '{"a": 1}',
                     {'content-type': 'application/json; charset=utf-8'})))

    def test_empty_body(self):
        self.assertEqual('', self.call(Response(200, '')))
        self.assertEqual('', self.call(
            Response(204, '', {'Content-Type': 'application/json'})))

    def test_non_json_body(self):
        self.assertEqual('[]', self.call(
            Response(200, '[]', {'Content-Type': 'text/plain'})))

    def test_http_component(self):
        response = Response(201, '{"id": "x"}',
                            {'Content-Type': 'application/json'})
        self.assertEqual(201, self.call(response, http_component='status'))
        self.assertEqual('{"id": "x"}',
                         self.call(response, http_component='body'))
        self.assertEqual('application/json',
                         self.call(response,
                                   http_component='headers')['content-type'])
        with self.assertRaises(ValueError):
            self.call(response, http_component='cookies')

    def test_http_component_still_raises(self):
        with self.assertRaises(ServerError):
            self.call(Response(500, ''), http_component='status')

    def test_decode_body(self):
        self.assertEqual(3, decode_body(
            Response(200, '3', {'Content-Type': 'application/json'})))


if __name__ == '__main__':
    unittest.main()
