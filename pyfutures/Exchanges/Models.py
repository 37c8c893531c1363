from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

import pandas


@dataclass(frozen=True)
class UserDataStream:
    listenKey: str

    @classmethod
    def fromJson(cls, payload):
        """ Builds the stream from `{"listenKey": "..."}` """
        if not isinstance(payload, dict):
            raise TypeError('Expected an object, got {}'.format(type(payload).__name__))
        listen_key = payload['listenKey']
        if not isinstance(listen_key, str):
            raise TypeError('listenKey should be a string')
        return cls(listenKey=listen_key)


def _toDecimal(value):
    if value is None:
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValueError('Invalid decimal value {!r}'.format(value))


def _toInt(value):
    if value is None:
        return None
    return int(value)


@dataclass(frozen=True)
class Candlestick:
    """ One kline. Binance sends each kline as an array:

        [openTime, open, high, low, close, volume, closeTime,
         quoteAssetVolume, numberOfTrades, takerBuyBaseAssetVolume,
         takerBuyQuoteAssetVolume, ignore]

    with prices and volumes as strings. """
    openTime: int
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: Decimal
    closeTime: int
    quoteAssetVolume: Decimal = None
    numberOfTrades: int = None
    takerBuyBaseAssetVolume: Decimal = None
    takerBuyQuoteAssetVolume: Decimal = None

    COLUMNS = [
        ('openTime', _toInt),
        ('open', _toDecimal),
        ('high', _toDecimal),
        ('low', _toDecimal),
        ('close', _toDecimal),
        ('volume', _toDecimal),
        ('closeTime', _toInt),
        ('quoteAssetVolume', _toDecimal),
        ('numberOfTrades', _toInt),
        ('takerBuyBaseAssetVolume', _toDecimal),
        ('takerBuyQuoteAssetVolume', _toDecimal),
    ]
    REQUIRED_COLUMNS = 7

    @classmethod
    def fromJson(cls, entry):
        """ Decodes a kline given either as the exchange's positional
        array or as an object keyed by column name """
        values = dict()
        if isinstance(entry, (list, tuple)):
            if len(entry) < cls.REQUIRED_COLUMNS:
                raise ValueError('Kline has {} columns, expected at least {}'.format(
                    len(entry), cls.REQUIRED_COLUMNS))
            for (name, convert), raw in zip(cls.COLUMNS, entry):
                values[name] = convert(raw)
        elif isinstance(entry, dict):
            for i, (name, convert) in enumerate(cls.COLUMNS):
                if i < cls.REQUIRED_COLUMNS:
                    values[name] = convert(entry[name])
                else:
                    values[name] = convert(entry.get(name))
        else:
            raise TypeError('Cannot decode a kline from {}'.format(type(entry).__name__))
        return cls(**values)


def decodeCandlesticks(payload):
    """ Decodes the /fapi/v1/klines response into a list of Candlesticks """
    if not isinstance(payload, list):
        raise TypeError('Expected a list of klines, got {}'.format(type(payload).__name__))
    return [Candlestick.fromJson(entry) for entry in payload]


def candlesticksToDataFrame(candles, cast_to:type=float):
    """ Puts candlesticks in a DataFrame with the usual OHLCV layout

        Returns
        --
            DataFrame with columns time, open, high, low, close, volume
            and date (time as a datetime)
    """
    col_names = ['time', 'open', 'high', 'low', 'close', 'volume']
    rows = [[c.openTime, c.open, c.high, c.low, c.close, c.volume] for c in candles]
    df = pandas.DataFrame(rows, columns=col_names)

    for col in col_names[1:]:
        df[col] = df[col].astype(cast_to)
    df['time'] = df['time'].astype('int64')
    df['date'] = pandas.to_datetime(df['time'], unit='ms')

    return df
