class BaseExchange:
    """
        Is the base class from which all Exchanges should inherit.
        Exchanges should implement all the functions outlined here (at least).

        The request helpers (`_signRequest`, `newRequest`, `do`) build and
        send requests, the endpoint functions are thin recipes on top of them.
    """

    def _signRequest(self, *args, **kwargs):
        """ (NOT IMPLEMENTED)
        Signs a request with the API & SECRET keys """
        raise NotImplementedError

    def newRequest(self, *args, **kwargs):
        """ (NOT IMPLEMENTED)
        Builds a request for an endpoint without sending it """
        raise NotImplementedError

    def do(self, *args, **kwargs):
        """ (NOT IMPLEMENTED)
        Sends a built request and decodes the response """
        raise NotImplementedError

    def newOrder(self, *args, **kwargs):
        """ (NOT IMPLEMENTED)
        Places order on exchange given its options """
        raise NotImplementedError

    def startUserDataStream(self, *args, **kwargs):
        """ (NOT IMPLEMENTED)
        Opens a user data stream and returns its listen key """
        raise NotImplementedError

    def keepAliveUserDataStream(self, *args, **kwargs):
        """ (NOT IMPLEMENTED)
        Extends the validity of the user data stream """
        raise NotImplementedError

    def closeUserDataStream(self, *args, **kwargs):
        """ (NOT IMPLEMENTED)
        Closes the user data stream """
        raise NotImplementedError

    def candlestickData(self, *args, **kwargs):
        """ (NOT IMPLEMENTED)
        Gets Candlestick data for symbol on interval (IE 1 minute) """
        raise NotImplementedError

    @classmethod
    def isValidResponse(cls, *args, **kwargs):
        """ (NOT IMPLEMENTED)
        Checks whether response received from exchange is valid

        Returns
        --
            True if valid, False otherwise
        """
        raise NotImplementedError
