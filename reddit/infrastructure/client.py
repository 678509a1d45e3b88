import logging
from typing import Any, Optional

import httpx
from decouple import config

from reddit.domain.value_objects import ResponseVO
from reddit.infrastructure.unmarshaller import Unmarshaller
from reddit.services.exceptions import (
    APIException,
    InvalidTokenException,
    NotFoundException,
    ServiceUnavailableException,
)

REDDIT_API_ENDPOINT = config(
    'REDDIT_API_ENDPOINT', default='https://oauth.reddit.com', cast=str
)
REDDIT_USER_AGENT = config(
    'REDDIT_USER_AGENT', default='reddit-client/0.1.0', cast=str
)
REDDIT_ACCESS_TOKEN = config('REDDIT_ACCESS_TOKEN', default='', cast=str)
REDDIT_TIMEOUT = config('REDDIT_TIMEOUT', default=4, cast=float)

logger = logging.getLogger(__name__)


class APIClient:
    """Thin synchronous wrapper around `httpx.Client` for the Reddit API.

    Non-2xx responses are raised as exceptions from
    `reddit.services.exceptions`; nothing is retried.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        user_agent: Optional[str] = None,
        access_token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        access_token = (
            REDDIT_ACCESS_TOKEN if access_token is None else access_token
        )
        headers = {'User-Agent': user_agent or REDDIT_USER_AGENT}
        if access_token:
            headers['Authorization'] = f'Bearer {access_token}'

        self.endpoint = (endpoint or REDDIT_API_ENDPOINT).rstrip('/')
        self.http = httpx.Client(
            base_url=self.endpoint,
            headers=headers,
            timeout=REDDIT_TIMEOUT if timeout is None else timeout,
            transport=transport,
        )
        self.unmarshaller = Unmarshaller(self)

    def __enter__(self) -> 'APIClient':
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self) -> None:
        self.http.close()

    def request(
        self,
        verb: str,
        path: str,
        raw: bool = False,
        params: Optional[dict] = None,
        form: Optional[dict] = None,
        body: Optional[str] = None,
    ) -> ResponseVO:
        method = str(verb).upper()
        params = dict(params or {})
        form = dict(form) if form is not None else None

        if not raw:
            params['raw_json'] = 1
            if form is not None:
                form['api_type'] = 'json'

        kwargs: dict[str, Any] = {'params': params}
        if body is not None:
            kwargs['content'] = body
            kwargs['headers'] = {'Content-Type': 'application/json'}
        elif form is not None:
            kwargs['data'] = form

        try:
            response = self.http.request(method, path, **kwargs)
        except (httpx.TimeoutException, httpx.ConnectError) as error:
            logger.warning('%s %s failed: %r', method, path, error)
            raise ServiceUnavailableException(
                f'Reddit API is unavailable: {repr(error)}'
            )

        logger.debug('%s %s -> %s', method, path, response.status_code)

        parsed = None
        if not raw:
            try:
                parsed = response.json()
            except ValueError:
                parsed = None

        result = ResponseVO(
            code=response.status_code,
            raw_body=response.text,
            headers=dict(response.headers),
            body=parsed,
        )
        self._raise_for_response(result)

        return result

    def get(self, path: str, **params) -> ResponseVO:
        return self.request('get', path, params=params)

    def post(self, path: str, **form) -> ResponseVO:
        return self.request('post', path, form=form)

    def put(self, path: str, **form) -> ResponseVO:
        return self.request('put', path, form=form)

    def patch(self, path: str, **form) -> ResponseVO:
        return self.request('patch', path, form=form)

    def delete(self, path: str, **form) -> ResponseVO:
        return self.request('delete', path, form=form)

    def model(self, verb: str, path: str, params: Optional[dict] = None):
        """Send a request and build models from the JSON response."""
        if str(verb).lower() == 'get':
            response = self.request(verb, path, params=params)
        else:
            response = self.request(verb, path, form=params or {})

        return self.unmarshal(response.body)

    def unmarshal(self, data):
        return self.unmarshaller.unmarshal(data)

    @staticmethod
    def _raise_for_response(response: ResponseVO) -> None:
        code = response.code

        if code in (401, 403):
            raise InvalidTokenException(
                f'Forbidden: HTTP {code}: {response.raw_body}',
                status_code=code,
                response=response,
            )
        if code == 404:
            raise NotFoundException(
                f'Not found: {response.raw_body}', response=response
            )
        if code >= 500:
            raise ServiceUnavailableException(
                f'Reddit API error: HTTP {code}', response=response
            )
        if not 200 <= code < 300:
            raise APIException(
                f'Unexpected response: HTTP {code}: {response.raw_body}',
                status_code=code,
                response=response,
            )

        body = response.body
        if isinstance(body, dict) and isinstance(body.get('json'), dict):
            errors = body['json'].get('errors')
            if errors:
                raise APIException(
                    f'Reddit API returned errors: {errors}',
                    status_code=code,
                    response=response,
                )
