# -*- coding: utf-8; -*-

"""Incremental decoders for content codings.

Each decoder is fed successive chunks of the encoded body through
:meth:`Decoder.decompress`, which returns at most about `max_length` bytes
per call and keeps any input it could not yet decode. While
:attr:`Decoder.needs_input` is false, the caller drains it with
``decompress(b'', max_length)`` before reading more of the body.
The end of the body is signalled with :meth:`Decoder.flush`.

The compression libraries themselves are trusted:
their exceptions propagate unchanged.
"""

import zlib

import brotli
import lz4.frame
import pyzstd
import snappy


class UnsupportedContentEncoding(Exception):

    """The ``Content-Encoding`` names a coding that cannot be decoded."""

    def __init__(self, coding):
        super(UnsupportedContentEncoding, self).__init__(
            'Unsupported content encoding: %s' % coding)
        self.coding = coding


class TruncatedContent(Exception):

    """The body ended before the coding's end-of-stream marker."""

    def __init__(self, coding):
        super(TruncatedContent, self).__init__(
            'Unexpected end of %s-encoded content' % coding)
        self.coding = coding


class Decoder(object):

    coding = None

    #: Whether a malformed header should be detected before the first read.
    eager = False

    def __init__(self):
        self.seen_data = False

    @property
    def finished(self):
        """Whether no more input is needed (or even accepted)."""
        return False

    @property
    def needs_input(self):
        return True

    def decompress(self, data, max_length):
        raise NotImplementedError

    def flush(self):
        """Called once the body is exhausted. Returns any remaining output."""
        if self.seen_data and not self.finished:
            raise TruncatedContent(self.coding)
        return b''

    def close(self):
        pass


class ZlibObject(object):

    """A zlib decompression object with the interface of the
    :mod:`bz2` and :mod:`lzma` decompressors and ``pyzstd``:
    ``decompress(data, max_length)``, ``needs_input``, ``eof``,
    ``unused_data``.
    """

    def __init__(self, wbits):
        self._obj = zlib.decompressobj(wbits)
        self.needs_input = True

    @property
    def eof(self):
        return self._obj.eof

    @property
    def unused_data(self):
        return self._obj.unused_data

    def decompress(self, data, max_length):
        out = self._obj.decompress(self._obj.unconsumed_tail + data,
                                   max_length)
        # A full output buffer may mean zlib holds more without new input.
        self.needs_input = (not self._obj.unconsumed_tail and
                            len(out) < max_length)
        return out


class MemberDecoder(Decoder):

    """A coding decoded by a single bounded decompression object."""

    def __init__(self):
        super(MemberDecoder, self).__init__()
        self._obj = self.new_member()

    def new_member(self):
        raise NotImplementedError

    @property
    def finished(self):
        return self._obj.eof

    @property
    def needs_input(self):
        return self._obj.needs_input

    def decompress(self, data, max_length):
        self.seen_data = self.seen_data or bool(data)
        return self._obj.decompress(data, max_length)


class ZlibDecoder(MemberDecoder):

    coding = 'zlib'
    eager = True
    wbits = zlib.MAX_WBITS

    def new_member(self):
        return ZlibObject(self.wbits)


class DeflateDecoder(ZlibDecoder):

    # Bare DEFLATE without the zlib wrapper, as sent by most servers.
    coding = 'deflate'
    eager = False
    wbits = -zlib.MAX_WBITS


class BrotliDecoder(Decoder):

    coding = 'br'

    def __init__(self):
        super(BrotliDecoder, self).__init__()
        self._obj = brotli.Decompressor()
        self._full = False

    @property
    def finished(self):
        return self._obj.is_finished()

    @property
    def needs_input(self):
        # Input that did not fit is kept by the decompressor.
        return not self._full

    def decompress(self, data, max_length):
        self.seen_data = self.seen_data or bool(data)
        out = self._obj.process(data, output_buffer_limit=max_length)
        self._full = len(out) >= max_length
        return out


class SnappyDecoder(Decoder):

    """Snappy framing format.

    The framing format has no end-of-stream marker, so the body is read
    to its end. An incomplete trailing chunk is reported by the library
    on :meth:`flush`.

    The library decodes every complete chunk it is given, so input is fed
    in pieces of :attr:`feed_size`. That is too small to hold more than
    two chunks of 64 KiB output each.
    """

    coding = 'snappy'
    feed_size = 4096

    def __init__(self):
        super(SnappyDecoder, self).__init__()
        self._obj = snappy.StreamDecompressor()
        self._input = b''

    @property
    def needs_input(self):
        return not self._input

    def decompress(self, data, max_length):
        if data:
            self.seen_data = True
            self._input += data
        piece = self._input[:self.feed_size]
        self._input = self._input[self.feed_size:]
        if not piece:
            return b''
        return self._obj.decompress(piece)

    def flush(self):
        return self._obj.flush()


class ConcatenatedDecoder(Decoder):

    """A coding whose body may consist of several independent members.

    ``gzip`` bodies can be a series of gzip members, and ``zstd`` and ``lz4``
    bodies a series of frames. They are all decoded as one stream,
    so the body is always read to its end.
    """

    def __init__(self):
        super(ConcatenatedDecoder, self).__init__()
        self._obj = self.new_member()

    def new_member(self):
        raise NotImplementedError

    @property
    def needs_input(self):
        if self._obj.eof:
            return not self._obj.unused_data
        return self._obj.needs_input

    def decompress(self, data, max_length):
        if data:
            self.seen_data = True
        if self._obj.eof:
            data = self._obj.unused_data + data
            self._obj = self.new_member()
        return self._obj.decompress(data, max_length)

    def flush(self):
        if self.seen_data and not self._obj.eof:
            raise TruncatedContent(self.coding)
        return b''


class GzipDecoder(ConcatenatedDecoder):

    coding = 'gzip'
    eager = True

    def new_member(self):
        # Just ``decompress(data, 16 + zlib.MAX_WBITS)`` doesn't work.
        return ZlibObject(16 + zlib.MAX_WBITS)


class ZstdDecoder(ConcatenatedDecoder):

    coding = 'zstd'
    eager = True

    def new_member(self):
        # Stops at the end of one frame, leaving the rest in `unused_data`.
        return pyzstd.ZstdDecompressor()


class LZ4Decoder(ConcatenatedDecoder):

    coding = 'lz4'

    def new_member(self):
        return lz4.frame.LZ4FrameDecompressor()

    def close(self):
        self._obj.reset()
