# -*- coding: utf-8; -*-


def force_unicode(x):
    if isinstance(x, bytes):
        return x.decode('iso-8859-1')
    else:
        return str(x)


def force_bytes(x):
    if isinstance(x, bytes):
        return x
    else:
        return x.encode('iso-8859-1', 'replace')
