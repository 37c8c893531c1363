import os
import sys
curr_path = os.path.abspath(__file__)
root_path = os.path.abspath(
	os.path.join(curr_path, os.path.pardir, os.path.pardir))
sys.path.append(root_path)

import logging
from pprint import pprint

from pyfutures import BinanceFutures, CandlestickDataOptions, candlesticksToDataFrame

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def Main():
	exchange = BinanceFutures(get_credentials_from_env=True, response_stream=sys.stderr)

	candles = exchange.candlestickData(
		CandlestickDataOptions(symbol='BTCUSDT', interval='15m', limit=10))
	print(candlesticksToDataFrame(candles))

	if not exchange.has_credentials:
		logger.info('No BINANCE_API_KEY / BINANCE_API_SECRET, skipping the user data stream.')
		return

	stream = exchange.startUserDataStream()
	pprint(stream)
	exchange.keepAliveUserDataStream()
	exchange.closeUserDataStream()


if __name__ == '__main__':
	Main()
