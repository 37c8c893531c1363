from collections import namedtuple
from enum import Enum


SecurityPolicy = namedtuple('SecurityPolicy', ['signed', 'api_key_header'])


class SecurityLevel(Enum):
    """
    Security type of an endpoint. Decides whether the query string
    gets signed and whether the X-MBX-APIKEY header is attached.
    """
    NONE = 0
    TRADE = 1
    USER_DATA = 2
    USER_STREAM = 3
    MARKET_DATA = 4

    @property
    def policy(self):
        return _POLICIES[self]

    @property
    def signed(self):
        return self.policy.signed

    @property
    def api_key_header(self):
        return self.policy.api_key_header


# Signed levels do not carry the API-key header.
_POLICIES = {
    SecurityLevel.NONE:        SecurityPolicy(signed=False, api_key_header=False),
    SecurityLevel.TRADE:       SecurityPolicy(signed=True,  api_key_header=False),
    SecurityLevel.USER_DATA:   SecurityPolicy(signed=True,  api_key_header=False),
    SecurityLevel.USER_STREAM: SecurityPolicy(signed=False, api_key_header=True),
    SecurityLevel.MARKET_DATA: SecurityPolicy(signed=False, api_key_header=True),
}
