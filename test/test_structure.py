# -*- coding: utf-8; -*-

import pytest

from httpdecompress.codings import GzipDecoder, LZ4Decoder
from httpdecompress.known import cc
from httpdecompress.known.base import KnownDict
from httpdecompress.structure import (CaseInsensitive, ContentCoding,
                                      FieldName, HeaderEntry,
                                      identity_codings)


def test_common_structures():
    assert CaseInsensitive('foo') == CaseInsensitive('Foo')
    assert CaseInsensitive('foo') != CaseInsensitive('bar')
    assert CaseInsensitive('foo') == 'Foo'
    assert CaseInsensitive('foo') != 'bar'
    assert hash(FieldName('Content-Encoding')) == \
        hash(FieldName('content-encoding'))
    assert repr(FieldName('Vary')) == "FieldName('Vary')"


def test_content_coding_is_case_sensitive():
    assert ContentCoding('gzip') == 'gzip'
    assert ContentCoding('gzip') != 'GZIP'
    assert ContentCoding('GZIP') not in cc
    assert ContentCoding('') in identity_codings
    assert ContentCoding('identity') in identity_codings
    assert ContentCoding('Identity') not in identity_codings


def test_header_entry():
    entry = HeaderEntry('content-encoding', 'gzip')
    assert entry.name == 'Content-Encoding'
    assert isinstance(entry.name, FieldName)
    assert entry.value == b'gzip'
    assert repr(entry) == '<HeaderEntry content-encoding>'
    assert HeaderEntry(b'X-Foo', b'\xe9').value == b'\xe9'


def test_known_codings():
    assert list(cc) == ['gzip', 'deflate', 'br', 'zstd', 'snappy', 'zlib',
                        'lz4']
    assert cc.get_info(cc.gzip)['decoder'] is GzipDecoder
    assert cc[cc.lz4]['decoder'] is LZ4Decoder
    assert cc.get_info(ContentCoding('bogus')) == {}
    with pytest.raises(AttributeError):
        cc.bogus                    # pylint: disable=pointless-statement


def test_known_dict_rejects_duplicates():
    with pytest.raises(AssertionError):
        KnownDict(ContentCoding, [{'_': ContentCoding('gzip')},
                                  {'_': ContentCoding('gzip')}])
