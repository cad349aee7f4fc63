from logging import getLogger
from typing import Any, Mapping, Optional, Union

import httpx
from opentelemetry import trace
from opentelemetry.trace import Span, SpanKind

from .._config import Config
from .._utils._auth import StaticTokenSource, TokenSource
from .._utils._console import LoggingNotifier, Notifier, NullIndicator, VisualIndicator
from .._utils._headers import build_headers
from .._utils._request_spec import RequestBody, RequestSpec
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import LOGGER_NAME, SPAN_NAME
from ..models.errors import ClassifiedError, DecodeFault
from ..models.progress import ProgressCallback
from ..models.responses import RequestState, ResponseType
from ._classifier import ErrorClassifier
from ._decoder import decode
from ._timeout import TimeoutController
from ._transports import TransportSelector


class RequestExecutor:
    """Runs requests through a single pipeline.

    Every call goes through the same steps:

    - headers are merged with the defaults (JSON content type, bearer token)
    - the call is bounded by a timeout that aborts the in-flight transport
    - the response is decoded according to the declared response type
    - failures are classified, notified once and re-raised

    The executor holds no per-call state, so concurrent calls on one instance
    are fully independent.

    Examples:
        >>> async with RequestExecutor(Config(base_url="https://api.example.com")) as api:
        ...     data = await api.fetch("/api/ping")
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        *,
        token_source: Optional[TokenSource] = None,
        notifier: Optional[Notifier] = None,
        indicator: Optional[VisualIndicator] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config or Config()
        self._token_source = token_source or StaticTokenSource(self._config.access_token)
        self._notifier = notifier or LoggingNotifier()
        self._indicator = indicator or NullIndicator()

        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(
                base_url=self._config.base_url or "",
                **get_httpx_client_kwargs(
                    verify_ssl=self._config.verify_ssl,
                    follow_redirects=self._config.follow_redirects,
                ),
            )
        self._client = client

        self._classifier = ErrorClassifier(self._notifier)
        self._transports = TransportSelector(self._client)
        self._tracer = trace.get_tracer(__name__)

    @property
    def config(self) -> Config:
        return self._config

    async def __aenter__(self) -> "RequestExecutor":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def fetch(
        self,
        url: str,
        *,
        method: str = "GET",
        headers: Optional[Mapping[str, str]] = None,
        body: RequestBody = None,
        params: Optional[Mapping[str, Any]] = None,
        timeout_ms: Optional[int] = None,
        response_type: Union[ResponseType, str] = ResponseType.JSON,
        on_upload_progress: Optional[ProgressCallback] = None,
        on_download_progress: Optional[ProgressCallback] = None,
    ) -> Any:
        """Build a :class:`RequestSpec` and execute it.

        ``timeout_ms`` falls back to the configured timeout when omitted.
        """
        spec = RequestSpec(
            url=url,
            method=method,
            headers=dict(headers or {}),
            body=body,
            params=dict(params or {}),
            timeout_ms=self._config.timeout_ms if timeout_ms is None else timeout_ms,
            response_type=response_type,  # type: ignore[arg-type]
            on_upload_progress=on_upload_progress,
            on_download_progress=on_download_progress,
        )
        return await self.execute(spec)

    async def execute(self, spec: RequestSpec) -> Any:
        """Execute one request and return the decoded body.

        Args:
            spec: The request to run.

        Returns:
            The body in the shape named by ``spec.response_type``, or JSON when
            a progress callback forced it.

        Raises:
            RequestAborted: The timeout fired before the call settled.
            NetworkFault: The transport failed (DNS, connection, protocol).
            HttpStatusFault: The server answered outside the 2xx range.
            BusinessFault: A 2xx JSON body carried a non-zero ``code``.
            DecodeFault: The body did not match the declared response type.
        """
        self._logger.debug(f"Request: {spec.method} {spec.url}")

        with self._tracer.start_as_current_span(
            SPAN_NAME,
            kind=SpanKind.CLIENT,
            attributes={
                "http.method": spec.method,
                "http.url": spec.url,
                "fetchkit.response_type": spec.response_type.value,
                "fetchkit.state": RequestState.IN_FLIGHT.value,
            },
        ) as span:
            self._indicator.start()
            try:
                data = await self._execute(spec, span)
            except ClassifiedError as e:
                state = self._classifier.state_for(e)
                span.set_attribute("fetchkit.state", state.value)
                self._classifier.report(e)
                self._logger.debug(f"Settled: {spec.method} {spec.url} -> {state.value}")
                raise
            finally:
                self._indicator.stop()

            span.set_attribute("fetchkit.state", RequestState.SUCCESS.value)
            self._logger.debug(
                f"Settled: {spec.method} {spec.url} -> {RequestState.SUCCESS.value}"
            )
            return data

    async def _execute(self, spec: RequestSpec, span: Span) -> Any:
        headers = build_headers(
            self._token_source.current_token(),
            spec.headers,
            multipart=spec.is_multipart,
        )
        transport = self._transports.select(spec)
        self._logger.debug(f"Transport: {transport.kind.value}")
        span.set_attribute("fetchkit.transport", transport.kind.value)

        try:
            with TimeoutController(spec.timeout_ms) as token:
                raw = await transport.send(spec, token, headers)
        except httpx.DecodingError as e:
            raise DecodeFault(spec.response_type.value, str(e)) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise self._classifier.classify_transport_error(e, spec.timeout_ms) from e

        span.set_attribute("http.status_code", raw.status_code)
        self._logger.debug(f"Response: {raw.status_code} {spec.method} {spec.url}")

        self._classifier.check_status(raw)
        data = decode(raw, spec.response_type)
        self._classifier.check_business(data)
        return data
