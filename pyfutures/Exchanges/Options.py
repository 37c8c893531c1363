import numbers
from dataclasses import dataclass, field, fields, is_dataclass
from decimal import Context, Decimal
from enum import Enum

from pyfutures.Exchanges.Base.Exceptions import SerializationError


def param(query, json=None, omitempty=False, default=''):
    """ Declares an option field together with its two encodings.

        Params
        --
            `query` str:
                name of the query parameter, '-' to never send the field
            `json` str:
                name used by `toJson`, defaults to the query name
            `omitempty` bool:
                leave the parameter out of the query string when the
                value is empty ('' / 0 / None / False / [])
    """
    return field(default=default, metadata={
        'query': query,
        'json': json if json is not None else query,
        'omitempty': omitempty,
    })


def _isEmpty(value):
    if value is None or value is False:
        return True
    if isinstance(value, (str, list, tuple)):
        return len(value) == 0
    if isinstance(value, (numbers.Number, Decimal)):
        return value == 0
    return False


def _encodeValue(name, value):
    """ Returns the list of string values `value` renders to """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return ['true' if value else 'false']
    if value is None:
        return ['']
    if isinstance(value, str):
        return [value]
    if isinstance(value, numbers.Integral):
        return [str(int(value))]
    if isinstance(value, Decimal):
        return [format(value, 'f')]
    if isinstance(value, numbers.Real):
        # no scientific notation
        ctx = Context()
        ctx.prec = 32
        return [format(ctx.create_decimal(repr(float(value))), 'f')]
    if isinstance(value, (list, tuple)):
        encoded = []
        for item in value:
            if isinstance(item, (list, tuple, dict)):
                raise SerializationError(
                    'Cannot encode nested {} in parameter {}'.format(
                        type(item).__name__, name))
            encoded.extend(_encodeValue(name, item))
        return encoded
    raise SerializationError(
        'Cannot encode parameter {} of type {}'.format(name, type(value).__name__))


def toQueryParams(options):
    """ Converts an options object into a list of (key, value) pairs.

        `options` can be None, an options dataclass declared with `param`
        fields, or a plain dict of parameters (None values are skipped).
        Keys may repeat when a value is a list.
    """
    params = []
    if options is None:
        return params

    if isinstance(options, dict):
        for key, value in options.items():
            if not isinstance(key, str):
                raise SerializationError(
                    'Parameter names must be strings, got {!r}'.format(key))
            if value is None:
                continue
            for encoded in _encodeValue(key, value):
                params.append((key, encoded))
        return params

    if not is_dataclass(options) or isinstance(options, type):
        raise SerializationError(
            'Cannot encode options of type {}'.format(type(options).__name__))

    for f in fields(options):
        name = f.metadata.get('query', f.name)
        if name == '-':
            continue
        value = getattr(options, f.name)
        if f.metadata.get('omitempty', False) and _isEmpty(value):
            continue
        for encoded in _encodeValue(name, value):
            params.append((name, encoded))
    return params


class Options:
    """ Base for option dataclasses """

    def toQueryParams(self):
        return toQueryParams(self)

    def toJson(self):
        """ Returns the options keyed by their JSON names """
        data = dict()
        for f in fields(self):
            name = f.metadata.get('json', f.name)
            if name == '-':
                continue
            data[name] = getattr(self, f.name)
        return data


@dataclass
class NewOrderOptions(Options):
    """ Parameters of POST /fapi/v1/order, all sent as strings.

    symbol, side, type and quantity are always sent, even when empty.
    timeInForce, price and reduceOnly are left out of the query string
    when empty, so a MARKET order does not send `price=` or
    `timeInForce=`. """
    symbol: str = param('symbol')
    side: str = param('side')
    type: str = param('type')
    timeInForce: str = param('timeInForce', omitempty=True)
    quantity: str = param('quantity')
    price: str = param('price', omitempty=True)
    reduceOnly: str = param('reduceOnly', omitempty=True)


@dataclass
class CandlestickDataOptions(Options):
    """ Parameters of GET /fapi/v1/klines. Times are epoch milliseconds,
    zero values are not sent. """
    symbol: str = param('symbol')
    interval: str = param('interval')
    startTime: int = param('startTime', omitempty=True, default=0)
    endTime: int = param('endTime', omitempty=True, default=0)
    limit: int = param('limit', omitempty=True, default=0)
