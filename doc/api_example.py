import urllib.request

import httpdecompress

request = urllib.request.Request(
    'https://example.com/',
    headers={'Accept-Encoding': httpdecompress.ACCEPT_ENCODING})

with urllib.request.urlopen(request) as response:
    with httpdecompress.decode(response) as body:
        for line in body:
            print(line.decode('utf-8', 'replace'), end='')
