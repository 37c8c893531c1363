import hashlib
import hmac
import json
import logging
import os
import time
from operator import itemgetter
from urllib.parse import urlencode, urljoin, urlsplit

import requests
from dotenv import load_dotenv, find_dotenv

from pyfutures.Exchanges.Base.BaseExchange import BaseExchange
from pyfutures.Exchanges.Base.Exceptions import \
    InvalidCredentialsException, \
    TransportError, \
    DecodeError
from pyfutures.Exchanges.Models import UserDataStream, decodeCandlesticks
from pyfutures.Exchanges.Options import toQueryParams
from pyfutures.Exchanges.Security import SecurityLevel

logger = logging.getLogger(__name__)


def currentMillis():
    """ Milliseconds since epoch """
    return int(round(time.time() * 1000))


def _encodeParams(params):
    return urlencode(sorted(params, key=itemgetter(0)))


class BinanceFutures(BaseExchange):
    """ Wrapper around the Binance USDⓈ-M Futures REST API """

    ORDER_SIDE_BUY = 'BUY'
    ORDER_SIDE_SELL = 'SELL'

    ORDER_TYPE_LIMIT = 'LIMIT'
    ORDER_TYPE_MARKET = 'MARKET'
    ORDER_TYPE_STOP = 'STOP'
    ORDER_TYPE_STOP_MARKET = 'STOP_MARKET'
    ORDER_TYPE_TAKE_PROFIT = 'TAKE_PROFIT'
    ORDER_TYPE_TAKE_PROFIT_MARKET = 'TAKE_PROFIT_MARKET'
    ORDER_TYPE_TRAILING_STOP_MARKET = 'TRAILING_STOP_MARKET'

    TIME_IN_FORCE_GTC = 'GTC'
    TIME_IN_FORCE_IOC = 'IOC'
    TIME_IN_FORCE_FOK = 'FOK'
    TIME_IN_FORCE_GTX = 'GTX'

    KLINE_INTERVALS = ['1m', '3m', '5m', '15m', '30m', '1h', '2h', '4h', '6h', '8h', '12h', '1d', '3d', '1w', '1M']

    BASE_URL = 'https://fapi.binance.com'
    API_KEY_HEADER = 'X-MBX-APIKEY'

    ENDPOINTS = {
        "order": '/fapi/v1/order',
        "listenKey": '/fapi/v1/listenKey',
        "klines": '/fapi/v1/klines',
    }

    def __init__(self, api_key=None, secret_key=None, base_url=None, filename=None,
        get_credentials_from_env=False, session=None, clock=None, response_stream=None):
        """
        Params
        --
            `api_key`, `secret_key` str:
                credentials, used when neither the environment nor
                `filename` provided them
            `base_url` str:
                overrides BASE_URL (e.g. the testnet)
            `filename` str:
                file holding the api key on the first line and the
                secret on the second
            `get_credentials_from_env` bool:
                read BINANCE_API_KEY, BINANCE_API_SECRET and
                BINANCE_FUTURES_BASE_URL (after loading a .env file)
            `session` requests.Session:
                session every request is sent through
            `clock` callable:
                returns the signing timestamp in milliseconds
            `response_stream` file-like:
                when set, every response body is written to it
        """
        credentials = None

        if get_credentials_from_env:
            load_dotenv(find_dotenv())
            env_api_key = os.getenv('BINANCE_API_KEY')
            env_secret_key = os.getenv('BINANCE_API_SECRET')
            if env_api_key is not None and env_secret_key is not None:
                credentials = (env_api_key, env_secret_key)
            if base_url is None:
                base_url = os.getenv('BINANCE_FUTURES_BASE_URL')
        elif filename is not None:
            credentials = self._readCredentialsFile(filename)

        if credentials is None and api_key is not None and secret_key is not None:
            credentials = (api_key, secret_key)

        if credentials is None:
            credentials = ('', '')

        api_key, secret = credentials
        if not isinstance(api_key, str):
            raise InvalidCredentialsException('The api key should be a string')
        if isinstance(secret, str):
            secret = secret.encode('utf-8')
        elif not isinstance(secret, bytes):
            raise InvalidCredentialsException('The secret should be a string or bytes')
        self._api_key = api_key
        self._secret = secret
        self._base_url = base_url if base_url else BinanceFutures.BASE_URL
        self._clock = clock if clock is not None else currentMillis
        self._response_stream = response_stream
        self.session = session if session is not None else requests.Session()

    @staticmethod
    def _readCredentialsFile(filename):
        try:
            with open(filename, 'r') as file:
                contents = file.read().split('\n')
        except OSError as e:
            raise InvalidCredentialsException(
                "Can't read {}, make sure the file is readable!".format(filename)) from e
        if len(contents) < 2 or not contents[0] or not contents[1]:
            raise InvalidCredentialsException(
                '{} should hold the api key and the secret on two lines'.format(filename))
        return contents[0].strip(), contents[1].strip()

    @property
    def api_key(self):
        return self._api_key

    @property
    def base_url(self):
        return self._base_url

    @property
    def has_credentials(self):
        return bool(self._api_key) and bool(self._secret)

    def _signRequest(self, params):
        """ Signs a request with the API & SECRET keys

            Params
            --
                `params` list:
                    (key, value) pairs, keys may repeat

            Returns
            --
                the query string, ordered by key, with the current timestamp
                and the HMAC-SHA256 signature appended last
        """
        params = [(key, value) for key, value in params if key != 'timestamp']
        params.append(('timestamp', str(self._clock())))
        query_string = _encodeParams(params)
        signature = hmac.new(self._secret, query_string.encode('utf-8'), hashlib.sha256)
        return query_string + '&signature=' + signature.hexdigest()

    def newRequest(self, method, path, options=None, security=SecurityLevel.NONE):
        """ Builds the request for an endpoint, does not send it.

            The query string is signed for TRADE and USER_DATA endpoints,
            the API key header is only added for USER_STREAM and
            MARKET_DATA endpoints.

            Raises
            --
                SerializationError if `options` cannot be encoded
        """
        security = SecurityLevel(security)
        policy = security.policy
        url = urljoin(self._base_url, path)
        params = toQueryParams(options)

        if policy.signed:
            query_string = self._signRequest(params)
        else:
            query_string = _encodeParams(params)

        if query_string:
            url = url + '?' + query_string

        headers = dict()
        if policy.api_key_header:
            headers[BinanceFutures.API_KEY_HEADER] = self._api_key

        return requests.Request(method=method.upper(), url=url, headers=headers)

    def _mirror(self, body):
        logger.debug('Response body: %s', body)
        if self._response_stream is not None:
            self._response_stream.write(body)
            self._response_stream.write('\n')

    def do(self, request, decoder=None):
        """ Sends a request built by `newRequest`.

            The response body is always read completely and the response
            closed. The HTTP status code is not checked.

            Params
            --
                `request` requests.Request
                `decoder` callable:
                    receives the parsed JSON body and returns the result;
                    if None the body is discarded

            Returns
            --
                (result, response), result is None without a decoder

            Raises
            --
                TransportError, DecodeError
        """
        path = urlsplit(request.url).path
        try:
            prepared = self.session.prepare_request(request)
            # session params would land after the signature
            prepared.prepare_url(request.url, None)
            logger.debug('%s %s', prepared.method, prepared.url.split('&signature=')[0])
            response = self.session.send(prepared, stream=True)
        except requests.exceptions.RequestException as e:
            raise TransportError('{} {} failed: {}'.format(
                request.method, path, e), response=e.response) from e

        try:
            body = response.content
        except requests.exceptions.RequestException as e:
            raise TransportError('Reading the response of {} {} failed: {}'.format(
                request.method, path, e), response=response) from e
        finally:
            response.close()

        self._mirror(body.decode(response.encoding or 'utf-8', errors='replace'))

        if decoder is None:
            return None, response

        try:
            payload = json.loads(body)
        except ValueError as e:
            raise DecodeError('Invalid JSON in response (status {}): {}'.format(
                response.status_code, e), response=response) from e
        try:
            result = decoder(payload)
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise DecodeError('Unexpected response shape (status {}): {!r}'.format(
                response.status_code, e), response=response) from e

        return result, response

    def newOrder(self, options):
        """ Places order on exchange given a NewOrderOptions (or a dict of
            parameters). Check this link for more info on the parameters:
            https://binance-docs.github.io/apidocs/futures/en/#new-order-trade

            Returns
            --
                the requests.Response, its body is not decoded
        """
        request = self.newRequest('POST', BinanceFutures.ENDPOINTS['order'],
            options, SecurityLevel.TRADE)
        _, response = self.do(request)
        return response

    def startUserDataStream(self):
        """ Starts a user data stream, returns a UserDataStream """
        request = self.newRequest('POST', BinanceFutures.ENDPOINTS['listenKey'],
            None, SecurityLevel.USER_STREAM)
        stream, _ = self.do(request, UserDataStream.fromJson)
        return stream

    def keepAliveUserDataStream(self):
        """ Keeps the user data stream alive for another 60 minutes """
        request = self.newRequest('PUT', BinanceFutures.ENDPOINTS['listenKey'],
            None, SecurityLevel.USER_STREAM)
        _, response = self.do(request)
        return response

    def closeUserDataStream(self):
        request = self.newRequest('DELETE', BinanceFutures.ENDPOINTS['listenKey'],
            None, SecurityLevel.USER_STREAM)
        _, response = self.do(request)
        return response

    def candlestickData(self, options):
        """ Gets candlestick data given a CandlestickDataOptions

            Returns
            --
                list of Candlestick, oldest first
        """
        request = self.newRequest('GET', BinanceFutures.ENDPOINTS['klines'],
            options, SecurityLevel.MARKET_DATA)
        candles, _ = self.do(request, decodeCandlesticks)
        return candles

    @classmethod
    def isValidResponse(cls, response):
        """
        Checks whether a decoded response is not a Binance error payload
        (errors carry a negative `code` and a `msg`)
        Returns
        --
        True if valid, False otherwise
        """
        if not isinstance(response, dict) or 'code' not in response:
            return True
        try:
            return int(response['code']) >= 0
        except (TypeError, ValueError):
            return False
