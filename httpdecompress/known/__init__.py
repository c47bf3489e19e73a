# -*- coding: utf-8; -*-

"""Tables of protocol elements that this package knows how to handle.

In this module, the term "key" means the actual token in question,
such as ``ContentCoding('gzip')``, whereas "name" means a Python identifier
suitable for attribute access, such as ``cc.gzip``.

"""

from httpdecompress.known.content_coding import known as cc


#: The value to send in ``Accept-Encoding`` to advertise
#: every content coding that can be decoded.
ACCEPT_ENCODING = ', '.join(cc)
