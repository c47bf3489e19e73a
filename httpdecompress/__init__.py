# -*- coding: utf-8; -*-

from httpdecompress.__metadata__ import version as __version__
from httpdecompress.codings import TruncatedContent, UnsupportedContentEncoding
from httpdecompress.helpers import read_all, read_into, read_into_file
from httpdecompress.known import ACCEPT_ENCODING
from httpdecompress.message import Response, decode
from httpdecompress.stream import decode_body

__all__ = [
    'ACCEPT_ENCODING',
    'Response',
    'TruncatedContent',
    'UnsupportedContentEncoding',
    'decode',
    'decode_body',
    'read_all',
    'read_into',
    'read_into_file',
]
