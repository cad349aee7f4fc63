import asyncio
import json
from pathlib import Path
from typing import Any, Optional, Tuple

import click

from .._config import Config
from .._services import RequestExecutor
from .._utils import ConsoleIndicator, ConsoleNotifier, EnvTokenSource, StaticTokenSource
from ..models import Blob, ClassifiedError, FormData, ProgressEvent, RequestError, ResponseType


def _parse_headers(values: Tuple[str, ...]) -> dict[str, str]:
    headers: dict[str, str] = {}
    for value in values:
        key, sep, header_value = value.partition(":")
        if not sep or not key.strip():
            raise click.BadParameter(
                f"Expected 'Name: value', got '{value}'", param_hint="--header"
            )
        headers[key.strip()] = header_value.strip()
    return headers


def _parse_form(values: Tuple[str, ...]) -> Optional[FormData]:
    if not values:
        return None

    form = FormData()
    for value in values:
        name, sep, field_value = value.partition("=")
        if not sep or not name:
            raise click.BadParameter(
                f"Expected 'name=value' or 'name=@path', got '{value}'",
                param_hint="--form",
            )
        if field_value.startswith("@"):
            path = Path(field_value[1:])
            if not path.is_file():
                raise click.BadParameter(f"File not found: {path}", param_hint="--form")
            form = form.with_file(name, path.name, path.read_bytes())
        else:
            form.fields[name] = field_value
    return form


def _render(data: Any) -> str:
    if isinstance(data, Blob):
        return f"<blob {data.size} bytes, {data.content_type or 'unknown type'}>"
    if isinstance(data, bytes):
        return f"<{len(data)} bytes>"
    if isinstance(data, FormData):
        return json.dumps(
            {
                "fields": data.fields,
                "files": {
                    name: {"filename": f.filename, "size": len(f.content)}
                    for name, f in data.files.items()
                },
            },
            indent=2,
        )
    if isinstance(data, str):
        return data
    return json.dumps(data, indent=2, ensure_ascii=False)


def _write_output(data: Any, output: str) -> None:
    path = Path(output)
    if isinstance(data, Blob):
        path.write_bytes(data.content)
    elif isinstance(data, bytes):
        path.write_bytes(data)
    else:
        path.write_text(_render(data), encoding="utf-8")


@click.command()
@click.argument("url")
@click.option("-X", "--method", default="GET", show_default=True, help="HTTP method")
@click.option(
    "-H", "--header", "headers", multiple=True, help="Request header as 'Name: value'"
)
@click.option("-d", "--data", help="Raw request body")
@click.option(
    "-F",
    "--form",
    "form",
    multiple=True,
    help="Multipart field as 'name=value' or 'name=@path'",
)
@click.option("--timeout-ms", type=click.IntRange(min=1), help="Request timeout in ms")
@click.option(
    "--response-type",
    type=click.Choice([t.value for t in ResponseType]),
    default=ResponseType.JSON.value,
    show_default=True,
)
@click.option(
    "--progress",
    is_flag=True,
    help="Show upload/download progress (the response is then decoded as JSON)",
)
@click.option("--token", help="Bearer token (defaults to FETCHKIT_ACCESS_TOKEN)")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    help="Write the response body to a file",
)
def request(
    url: str,
    method: str,
    headers: Tuple[str, ...],
    data: Optional[str],
    form: Tuple[str, ...],
    timeout_ms: Optional[int],
    response_type: str,
    progress: bool,
    token: Optional[str],
    output: Optional[str],
) -> None:
    """Send a request and print the decoded response."""
    if data is not None and form:
        raise click.UsageError("--data and --form are mutually exclusive")

    request_headers = _parse_headers(headers)
    body = _parse_form(form) if form else data
    config = Config.from_env(timeout_ms=timeout_ms)
    indicator = ConsoleIndicator(f"{method.upper()} {url}")

    def show_progress(direction: str):
        def callback(event: ProgressEvent) -> None:
            fraction = event.fraction
            if fraction is not None:
                indicator.update(
                    f"{direction} {event.loaded}/{event.total} bytes ({fraction:.0%})"
                )
            else:
                indicator.update(f"{direction} {event.loaded} bytes")

        return callback

    async def run() -> Any:
        async with RequestExecutor(
            config,
            token_source=StaticTokenSource(token) if token else EnvTokenSource(),
            notifier=ConsoleNotifier(),
            indicator=indicator,
        ) as executor:
            return await executor.fetch(
                url,
                method=method,
                headers=request_headers,
                body=body,
                response_type=response_type,
                on_upload_progress=show_progress("Uploading") if progress else None,
                on_download_progress=show_progress("Downloading") if progress else None,
            )

    try:
        result = asyncio.run(run())
    except ClassifiedError:
        # already reported by the notifier
        click.get_current_context().exit(1)
    except RequestError as e:
        click.echo(f"❌ {click.style(e.message, fg='red')}", err=True)
        click.get_current_context().exit(1)

    if output:
        _write_output(result, output)
        click.echo(f"Response written to {output}", err=True)
    else:
        click.echo(_render(result))
