import httpx
import pytest

from fetchkit import FormData, RequestSpec, TransportKind
from fetchkit._services import ProgressTransport, StreamingTransport, TransportSelector


def _noop(event) -> None:
    pass


@pytest.fixture
def selector() -> TransportSelector:
    return TransportSelector(httpx.AsyncClient())


class TestTransportSelector:
    def test_multipart_upload_with_progress_uses_progress_transport(
        self, selector: TransportSelector
    ):
        spec = RequestSpec(
            url="/upload",
            method="POST",
            body=FormData(fields={"a": "1"}),
            on_upload_progress=_noop,
        )

        transport = selector.select(spec)

        assert isinstance(transport, ProgressTransport)
        assert transport.kind is TransportKind.PROGRESS

    @pytest.mark.parametrize(
        "spec",
        [
            RequestSpec(url="/a"),
            RequestSpec(url="/a", body=FormData(fields={"a": "1"})),
            RequestSpec(url="/a", body=b"raw", on_upload_progress=_noop),
            RequestSpec(url="/a", on_download_progress=_noop),
        ],
    )
    def test_everything_else_streams(self, selector: TransportSelector, spec: RequestSpec):
        transport = selector.select(spec)

        assert isinstance(transport, StreamingTransport)
        assert TransportSelector.kind_for(spec) is TransportKind.STREAMING
