import os
import sys
import unittest
from decimal import Decimal

curr_path = os.path.abspath(__file__)
root_path = os.path.abspath(
    os.path.join(curr_path, os.path.pardir, os.path.pardir))
sys.path.insert(1, root_path)

from pandas import DataFrame

from pyfutures.Exchanges.Models import \
    UserDataStream, Candlestick, decodeCandlesticks, candlesticksToDataFrame
from tests.utils import kline


class ModelsTests(unittest.TestCase):

    def test_UserDataStreamFromJson(self):
        stream = UserDataStream.fromJson({"listenKey": "abc123"})
        self.assertEqual(stream.listenKey, "abc123")

    def test_UserDataStreamWrongShape(self):
        with self.assertRaises(KeyError):
            UserDataStream.fromJson({"key": "abc123"})
        with self.assertRaises(TypeError):
            UserDataStream.fromJson(["abc123"])
        with self.assertRaises(TypeError):
            UserDataStream.fromJson({"listenKey": 5})

    def test_CandlestickFromPositionalArray(self):
        candle = Candlestick.fromJson([
            1499040000000, "0.01634790", "0.80000000", "0.01575800", "0.01577100",
            "148976.11427815", 1499644799999, "2434.19055334", 308,
            "1756.87402397", "28.46694368", "17928899.62484339"])
        self.assertEqual(candle.openTime, 1499040000000)
        self.assertEqual(candle.open, Decimal("0.01634790"))
        self.assertEqual(candle.high, Decimal("0.80000000"))
        self.assertEqual(candle.low, Decimal("0.01575800"))
        self.assertEqual(candle.close, Decimal("0.01577100"))
        self.assertEqual(candle.volume, Decimal("148976.11427815"))
        self.assertEqual(candle.closeTime, 1499644799999)
        self.assertEqual(candle.quoteAssetVolume, Decimal("2434.19055334"))
        self.assertEqual(candle.numberOfTrades, 308)
        self.assertEqual(candle.takerBuyBaseAssetVolume, Decimal("1756.87402397"))
        self.assertEqual(candle.takerBuyQuoteAssetVolume, Decimal("28.46694368"))

    def test_CandlestickFromShortArray(self):
        candle = Candlestick.fromJson([0, "1", "2", "0.5", "1.5", "10", 59999])
        self.assertEqual(candle.closeTime, 59999)
        self.assertIsNone(candle.numberOfTrades)

    def test_CandlestickFromObject(self):
        candle = Candlestick.fromJson({
            "openTime": 0, "open": "1", "high": "2", "low": "0.5",
            "close": "1.5", "volume": "10", "closeTime": 59999})
        self.assertEqual(candle.high, Decimal("2"))
        self.assertIsNone(candle.quoteAssetVolume)

    def test_CandlestickWrongShape(self):
        with self.assertRaises(ValueError):
            Candlestick.fromJson([0, "1", "2"])
        with self.assertRaises(ValueError):
            Candlestick.fromJson([0, "one", "2", "0.5", "1.5", "10", 59999])
        with self.assertRaises(KeyError):
            Candlestick.fromJson({"openTime": 0})
        with self.assertRaises(TypeError):
            Candlestick.fromJson("0,1,2")
        with self.assertRaises(TypeError):
            decodeCandlesticks({"code": -1121, "msg": "Invalid symbol."})

    def test_CandlesticksToDataFrame(self):
        candles = decodeCandlesticks([kline(1609459200000), kline(1609459260000, close='90.0')])
        df = candlesticksToDataFrame(candles)
        assert isinstance(df, DataFrame), "should return a dataframe"
        self.assertEqual(len(df), 2)
        for x in ['open', 'high', 'low', 'close', 'volume', 'time', 'date']:
            assert x in df.columns, \
                x+" should be a column in the Candlestick dataframe"
        self.assertEqual(df['close'][1], 90.0)
        self.assertEqual(df['time'][0], 1609459200000)
        self.assertEqual(str(df['date'][1]), '2021-01-01 00:01:00')

    def test_EmptyDataFrame(self):
        df = candlesticksToDataFrame([])
        self.assertEqual(len(df), 0)
        self.assertIn('date', df.columns)


if __name__ == "__main__":
    unittest.main()
