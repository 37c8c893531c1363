from pyfutures.Exchanges.BinanceFutures import BinanceFutures
from pyfutures.Exchanges.Security import SecurityLevel, SecurityPolicy
from pyfutures.Exchanges.Options import NewOrderOptions, CandlestickDataOptions
from pyfutures.Exchanges.Models import UserDataStream, Candlestick, candlesticksToDataFrame
from pyfutures.Exchanges.Base.Exceptions import \
    ExchangeException, \
    InvalidCredentialsException, \
    SerializationError, \
    TransportError, \
    DecodeError
