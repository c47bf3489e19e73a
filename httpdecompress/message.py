# -*- coding: utf-8; -*-

from functools import singledispatch
import http.client

from httpdecompress.stream import decode_body
from httpdecompress.structure import FieldName, HeaderEntry
from httpdecompress.util.text import force_unicode


content_encoding_header = FieldName('Content-Encoding')


class Response(object):

    def __init__(self, header_entries, body):
        """
        :param header_entries:
            A list of the response's headers (may be empty).
            Every item of the list must be a ``(name, value)`` pair.
            `name` must be a Unicode string. `value` may be a byte string
            or a Unicode string.

        :param body:
            The response's payload body as a readable, closable file-like
            object that yields the bytes exactly as received,
            that is, before any content coding is removed.
        """
        self.header_entries = [HeaderEntry(k, v) for k, v in header_entries]
        self.body = body

    def __repr__(self):
        return '<Response %s>' % content_encoding_of(self)

    def get_header(self, name, default=None):
        for entry in self.header_entries:
            if entry.name == name:
                return force_unicode(entry.value)
        return default


def _lookup(headers, name):
    # Works with plain dicts as well as ``email.message.Message``
    # and case-insensitive mappings: the first matching entry wins.
    for (k, v) in headers.items():
        if FieldName(force_unicode(k)) == name:
            return force_unicode(v)
    return None


@singledispatch
def content_encoding_of(response):
    headers = getattr(response, 'headers', None)
    if headers is None:
        return ''
    return _lookup(headers, content_encoding_header) or ''

@content_encoding_of.register(Response)
def _response_content_encoding(response):
    return response.get_header(content_encoding_header, '')


@singledispatch
def body_of(response):
    for attr_name in ['body', 'raw']:
        body = getattr(response, attr_name, None)
        if body is not None:
            return body
    return response

@body_of.register(Response)
def _response_body(response):
    return response.body

@body_of.register(http.client.HTTPResponse)
def _http_client_body(response):
    # An ``http.client`` response is its own body.
    return response


def decode(response):
    """Return a stream of the response's body with its content coding removed.

    :param response:
        An :class:`httpdecompress.Response`,
        an :class:`http.client.HTTPResponse`, or any object with a `headers`
        mapping and a file-like `body` or `raw` attribute
        (such as a :mod:`requests` response made with ``stream=True``).
    :return:
        A readable file-like object. Closing it closes the response body.
        Use it in a ``with`` statement.
    :raises httpdecompress.UnsupportedContentEncoding:
        If ``Content-Encoding`` names a coding that cannot be decoded.
        The body is left untouched in this case.
    """
    return decode_body(body_of(response), content_encoding_of(response))
