# -*- coding: utf-8; -*-

"""Classes for representing the protocol elements that drive decoding."""

from collections import namedtuple

from httpdecompress.util.text import force_bytes, force_unicode


class ProtocolString(str):

    """Base class for various constant strings used in HTTP."""

    __slots__ = ()

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, str.__repr__(self))


class CaseInsensitive(ProtocolString):

    __slots__ = ()

    def __eq__(self, other):
        if isinstance(other, str):
            return self.lower() == other.lower()
        return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.lower())


class FieldName(CaseInsensitive):

    __slots__ = ()


class ContentCoding(ProtocolString):

    """A content coding token, such as ``gzip``.

    Unlike field names, tokens are matched exactly:
    ``ContentCoding('gzip') != 'GZIP'``.
    """

    __slots__ = ()


class HeaderEntry(namedtuple('HeaderEntry', ('name', 'value'))):

    """A single header field from a response's headers.

    A response can have more than one header entry with the same :attr:`name`.
    """

    __slots__ = ()

    def __new__(cls, name, value):
        return super(HeaderEntry, cls).__new__(cls,
                                               FieldName(force_unicode(name)),
                                               force_bytes(value))

    def __repr__(self):
        return '<HeaderEntry %s>' % self.name


# Tokens that mean "no transformation has been applied".
identity_codings = frozenset([ContentCoding(''), ContentCoding('identity')])
