class ExchangeException(Exception):
    """ Base class for every error raised by this package """
    pass


class InvalidCredentialsException(ExchangeException):
    """ The API & SECRET keys could not be read """
    pass


class SerializationError(ExchangeException):
    """ Raised when an options object cannot be encoded as query parameters.
    Nothing has been sent when this is raised. """
    pass


class TransportError(ExchangeException):
    """ Raised on DNS, connection, write or read failures.
    `response` is the (partially read) response if there was one. """

    def __init__(self, message, response=None):
        super().__init__(message)
        self.response = response


class DecodeError(ExchangeException):
    """ Raised when a response body is not JSON or has an unexpected shape.
    `response` is the fully read (and closed) response. """

    def __init__(self, message, response=None):
        super().__init__(message)
        self.response = response
