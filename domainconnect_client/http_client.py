#
#
#

import logging

from requests import RequestException, Session

from .clients import HttpResponse
from .exceptions import DomainConnectTransportError


class RequestsHttpClient(object):
    def __init__(self, timeout=10.0, user_agent=None, session=None):
        self.log = logging.getLogger('RequestsHttpClient')
        session = session or Session()
        if user_agent:
            session.headers.update({'User-Agent': user_agent})
        session.headers.update({'Accept': 'application/json'})
        self._session = session
        self._timeout = timeout

    def _do(self, method, url):
        self.log.debug('_do: method=%s, url=%s', method, url)
        try:
            response = self._session.request(
                method, url, timeout=self._timeout
            )
        except RequestException as e:
            raise DomainConnectTransportError(url, e) from e
        self.log.debug('_do:   status=%d', response.status_code)
        return response

    def _body(self, response):
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            self.log.debug('_body: non-json response from %s', response.url)
            return None

    def get(self, url):
        response = self._do('GET', url)
        return HttpResponse(response.status_code, self._body(response))
