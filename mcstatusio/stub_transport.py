"""
Canned HTTP transport for tests
"""

import json

from mcstatusio.core.transport import Transport, HttpResponse

class StubTransport(Transport):
    """Returns a canned response and records requested URLs"""
    def __init__(self, status=200, body=b"", content_type="application/json", error=None):
        self.response = HttpResponse(status=status, body=body, content_type=content_type)
        self.error = error
        self.requests = []
    async def get(self, url, timeout):
        self.requests.append((url, timeout))
        if self.error:
            raise self.error
        return self.response

def json_transport(document, status=200):
    return StubTransport(status=status, body=json.dumps(document).encode('utf-8'))

