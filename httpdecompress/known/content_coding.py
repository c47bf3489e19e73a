# -*- coding: utf-8; -*-

from httpdecompress.codings import (BrotliDecoder, DeflateDecoder,
                                    GzipDecoder, LZ4Decoder, SnappyDecoder,
                                    ZlibDecoder, ZstdDecoder)
from httpdecompress.known.base import KnownDict
from httpdecompress.structure import ContentCoding


# The order of this table is the order of preference advertised
# in ``Accept-Encoding``.
known = KnownDict(ContentCoding, [
 {'_': ContentCoding('gzip'), '_title': 'GZIP', 'decoder': GzipDecoder},
 {'_': ContentCoding('deflate'), '_title': 'DEFLATE',
  'decoder': DeflateDecoder},
 {'_': ContentCoding('br'), '_title': 'Brotli', 'decoder': BrotliDecoder},
 {'_': ContentCoding('zstd'), '_title': 'Zstandard', 'decoder': ZstdDecoder},
 {'_': ContentCoding('snappy'), '_title': 'Snappy framing format',
  'decoder': SnappyDecoder},
 {'_': ContentCoding('zlib'), '_title': 'ZLIB', 'decoder': ZlibDecoder},
 {'_': ContentCoding('lz4'), '_title': 'LZ4 frame format',
  'decoder': LZ4Decoder},
], extra_info=['decoder'])
