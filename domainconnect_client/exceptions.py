#
#
#


class DomainConnectException(Exception):
    pass


class DomainConnectTransportError(DomainConnectException):
    def __init__(self, url, cause):
        super().__init__(str(cause))
        self.url = url
        self.cause = cause


class DomainConnectResolutionError(DomainConnectException):
    def __init__(self, domain, cause):
        super().__init__(str(cause))
        self.domain = domain
        self.cause = cause


class DomainConnectConfigError(DomainConnectException):
    pass
