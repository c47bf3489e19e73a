# -*- coding: utf-8; -*-

import io
import logging

from httpdecompress.codings import UnsupportedContentEncoding
from httpdecompress.known import cc
from httpdecompress.structure import ContentCoding, identity_codings


logger = logging.getLogger(__name__)


def read_chunk(file_, n):
    # ``read1`` returns whatever is available instead of waiting for `n` bytes.
    read1 = getattr(file_, 'read1', None)
    if read1 is not None:
        return read1(n)
    return file_.read(n)


class PassThroughStream(io.RawIOBase):

    """Presents an unencoded body as a decoded stream, without buffering."""

    def __init__(self, file_):
        super(PassThroughStream, self).__init__()
        self.file = file_

    def readable(self):
        return True

    def readinto(self, b):
        if self.closed:
            raise ValueError('I/O operation on closed file')
        data = self.file.read(len(b))
        n = len(data)
        b[:n] = data
        return n

    def close(self):
        if not self.closed:
            try:
                self.file.close()
            finally:
                super(PassThroughStream, self).close()


class DecodedStream(io.RawIOBase):

    """Wraps an encoded body and a :class:`httpdecompress.codings.Decoder`.

    Closing the stream releases the decoder and closes the body,
    exactly once, whatever the coding.
    """

    chunk_size = 64 * 1024

    def __init__(self, file_, decoder):
        super(DecodedStream, self).__init__()
        self.file = file_
        self.decoder = decoder
        self.eof = False
        self._pending = b''
        self._pos = 0
        if decoder.eager:
            try:
                self._fill()
            except Exception:
                self.close()
                raise

    def readable(self):
        return True

    def _fill(self):
        # At most about `chunk_size` decoded bytes are held at a time,
        # however well the body compresses.
        while self._pos >= len(self._pending) and not self.eof:
            if self.decoder.finished:
                self.eof = True
                break
            if not self.decoder.needs_input:
                out = self.decoder.decompress(b'', self.chunk_size)
            else:
                data = read_chunk(self.file, self.chunk_size)
                if data:
                    out = self.decoder.decompress(data, self.chunk_size)
                else:
                    out = self.decoder.flush()
                    self.eof = True
            self._pending, self._pos = out, 0

    def readinto(self, b):
        if self.closed:
            raise ValueError('I/O operation on closed file')
        self._fill()
        n = min(len(b), len(self._pending) - self._pos)
        b[:n] = self._pending[self._pos:self._pos + n]
        self._pos += n
        return n

    def close(self):
        if not self.closed:
            logger.debug('closing %s stream', self.decoder.coding)
            try:
                try:
                    self.decoder.close()
                finally:
                    self.file.close()
            finally:
                super(DecodedStream, self).close()


def decode_body(file_, coding):
    """Wrap an encoded body in a stream that yields the decoded bytes.

    :param file_:
        A readable, closable file-like object with the body as sent.
    :param coding:
        The value of ``Content-Encoding``, as a string. The empty string,
        ``identity`` and `None` mean the body is not encoded.
    :return:
        An :class:`io.RawIOBase` that owns `file_`: closing it closes `file_`.
    :raises UnsupportedContentEncoding:
        If `coding` is not one of :data:`httpdecompress.ACCEPT_ENCODING`.
        `file_` is left untouched in this case.
    """
    coding = ContentCoding(coding or '')
    if coding in identity_codings:
        logger.debug('passing through body with coding %r', coding)
        return PassThroughStream(file_)
    if coding not in cc:
        logger.debug('unsupported content coding %r', coding)
        raise UnsupportedContentEncoding(coding)
    decoder = cc.get_info(coding)['decoder']()
    logger.debug('decoding body with %s', decoder.__class__.__name__)
    return DecodedStream(file_, decoder)
