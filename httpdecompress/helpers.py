# -*- coding: utf-8; -*-

"""Functions that read a whole decoded body in one call.

Each of them closes the response body before returning or raising,
including when the body cannot be decoded at all.
"""

import errno
import io
import logging
import os

from httpdecompress.codings import UnsupportedContentEncoding
from httpdecompress.message import body_of, decode


__all__ = ['read_all', 'read_into', 'read_into_file']

logger = logging.getLogger(__name__)

BUFFER_SIZE = 64 * 1024


def _acquire(response):
    try:
        return decode(response)
    except UnsupportedContentEncoding:
        # No stream was made to own the body, so release it here.
        body_of(response).close()
        raise


def read_all(response):
    """Return the whole decoded body of `response` as a byte string."""
    with _acquire(response) as stream:
        return stream.read()


def read_into(response, sink):
    """Copy the decoded body of `response` into `sink`.

    The body is copied through a fixed-size buffer, so it may be
    arbitrarily large.

    :param sink:
        A writable file-like object. It is not closed. A ``write`` that
        accepts only part of the data is called again with the rest.
        A ``write`` that returns `None` is taken to have written everything.
    :return: The number of decoded bytes written.
    :raises OSError: If `sink` stops accepting data.
    """
    total = 0
    with _acquire(response) as stream, \
            memoryview(bytearray(BUFFER_SIZE)) as view:
        while True:
            n = stream.readinto(view)
            if not n:
                break
            _write_all(sink, view[:n])
            total += n
    logger.debug('copied %d decoded bytes', total)
    return total


def _write_all(sink, data):
    done = 0
    while done < len(data):
        written = sink.write(data[done:])
        if written is None:
            break
        if written <= 0:
            raise OSError(errno.EIO, 'short write: %d of %d bytes' %
                          (done, len(data)))
        done += written


def _create_file(path, perm):
    fd = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, perm)
    try:
        return io.open(fd, 'wb')
    except BaseException:
        os.close(fd)
        raise


def read_into_file(response, path, perm=0o644):
    """Write the decoded body of `response` to the file at `path`.

    The file is created with permission bits `perm` (minus the umask)
    if it does not exist, and truncated if it does. If it cannot be opened,
    the body is closed without being read.

    :return: The number of decoded bytes written.
    """
    try:
        f = _create_file(path, perm)
    except OSError:
        body_of(response).close()
        raise
    with f:
        return read_into(response, f)
