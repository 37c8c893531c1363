import io
import json

from requests import Response, Session
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict
from urllib3.exceptions import ProtocolError


class TrackedBody(io.BytesIO):
    """ Raw response body that remembers whether it was released """

    def __init__(self, data):
        super().__init__(data)
        self.released = False

    def release_conn(self):
        self.released = True


class BrokenBody(TrackedBody):
    """ Raw response body whose connection drops while reading """

    def stream(self, amt=None, decode_content=None):
        yield self.read(4)
        raise ProtocolError('Connection broken: IncompleteRead')


class RecordingAdapter(BaseAdapter):
    """ Transport adapter standing in for the exchange. Records the
    prepared requests it receives and answers with a canned body. """

    def __init__(self, body=b'', status_code=200, error=None, broken=False):
        super().__init__()
        if not isinstance(body, bytes):
            body = json.dumps(body).encode('utf-8')
        self.body = body
        self.status_code = status_code
        self.error = error
        self.broken = broken
        self.requests = []
        self.responses = []

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.requests.append(request)
        if self.error is not None:
            raise self.error

        response = Response()
        response.status_code = self.status_code
        response.headers = CaseInsensitiveDict({'Content-Type': 'application/json'})
        response.raw = BrokenBody(self.body) if self.broken else TrackedBody(self.body)
        response.encoding = 'utf-8'
        response.url = request.url
        response.request = request
        self.responses.append(response)
        return response

    def close(self):
        pass

    @property
    def last_request(self):
        return self.requests[-1]


def get_session(adapter):
    """ Returns a requests Session which sends everything to `adapter` """
    session = Session()
    session.trust_env = False
    session.mount('https://', adapter)
    session.mount('http://', adapter)
    return session


def kline(open_time, open_price='100.0', high='110.0', low='90.0', close='105.0', volume='12.5'):
    """ A kline laid out the way /fapi/v1/klines returns it """
    return [open_time, open_price, high, low, close, volume, open_time + 59999,
        '1312.5', 42, '6.25', '656.25', '0']
