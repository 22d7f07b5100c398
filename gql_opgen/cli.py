"""Command-line interface for gql-opgen."""

import asyncio
import logging
from pathlib import Path

import click

from .core.emitter import OperationEmitter
from .core.errors import GenerationError
from .core.fetcher import fetch_schema, load_schema_file
from .core.hooks import AddHeaderHook, FilterFieldsHook, HookRunner
from .core.sdk_generator import SdkGenerator


class ClickLogHandler(logging.Handler):
    """Logging handler that writes through click.echo to stderr."""

    def emit(self, record: logging.LogRecord):
        click.echo(self.format(record), err=True)


def configure_logging(verbose: bool):
    """Show package logs on stderr; DEBUG with --verbose, WARNING otherwise."""
    logger = logging.getLogger("gql_opgen")
    if not any(isinstance(h, ClickLogHandler) for h in logger.handlers):
        handler = ClickLogHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def parse_headers(values: tuple[str, ...]) -> dict[str, str]:
    """Parse repeated ``Name: value`` options into a header dict."""
    headers = {}
    for value in values:
        name, sep, header_value = value.partition(":")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected 'Name: value', got {value!r}", param_hint="--header")
        headers[name.strip()] = header_value.strip()
    return headers


@click.group()
@click.version_option()
def main():
    """GraphQL operation document generator.

    Generate one operation document per root field of a GraphQL schema,
    and a Python SDK wrapping those documents.
    """
    pass


@main.command()
@click.option(
    "--url",
    "-u",
    envvar="GQL_OPGEN_SCHEMA_URL",
    help="Schema endpoint serving the introspection document (env: GQL_OPGEN_SCHEMA_URL).",
)
@click.option(
    "--schema-file",
    "-s",
    type=click.Path(exists=True, dir_okay=False),
    help="Local introspection JSON or SDL (.graphql, .graphqls) file, instead of --url.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(file_okay=False),
    help="Output directory for generated documents.",
)
@click.option(
    "--method",
    type=click.Choice(["GET", "POST"], case_sensitive=False),
    default="GET",
    show_default=True,
    help="GET the introspection JSON, or POST the introspection query.",
)
@click.option(
    "--header",
    "-H",
    "headers",
    multiple=True,
    help="Extra request header as 'Name: value'. Repeatable.",
)
@click.option(
    "--timeout",
    type=float,
    default=30.0,
    show_default=True,
    help="Request timeout in seconds.",
)
@click.option(
    "--exclude-prefix",
    help="Skip root fields whose name starts with this prefix.",
)
@click.option(
    "--add-header",
    "file_header",
    help="Comment header added to every generated document.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(url, schema_file, output, method, headers, timeout, exclude_prefix, file_header, verbose):
    """Generate operation documents from a GraphQL schema.

    Examples:

        gql-opgen generate --url https://api.example.com/schema.json --output ./documents

        gql-opgen generate -u https://api.example.com/graphql --method POST -o ./documents

        gql-opgen generate -s ./schema.graphqls -o ./documents
    """
    configure_logging(verbose)
    if bool(url) == bool(schema_file):
        raise click.UsageError("Provide exactly one of --url or --schema-file.")

    output_path = Path(output).resolve()
    if verbose:
        click.echo(f"Schema: {url or schema_file}")
        click.echo(f"Output: {output_path}")

    try:
        click.echo("Fetching schema...")
        if url:
            catalog = asyncio.run(
                fetch_schema(url, method=method, headers=parse_headers(headers), timeout=timeout)
            )
        else:
            catalog = load_schema_file(schema_file)

        if verbose:
            click.echo(f"  Types: {len(catalog)}")
            for op_type in ("query", "mutation", "subscription"):
                click.echo(f"  {op_type.capitalize()} fields: {len(catalog.root_operations(op_type))}")

        hooks = HookRunner()
        if exclude_prefix:
            hooks.add_pre_hook(FilterFieldsHook(exclude_prefix=exclude_prefix))
        if file_header:
            hooks.add_post_hook(AddHeaderHook(file_header))

        click.echo("Generating documents...")
        result = OperationEmitter(catalog, str(output_path), hooks=hooks).emit()
    except GenerationError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        for op_type, paths in result.files.items():
            click.echo(f"  {op_type}: {len(paths)}")
    click.echo(f"Done! Generated {result.total} documents in {output_path}")


@main.command()
@click.option(
    "--input",
    "-i",
    "documents_dir",
    required=True,
    type=click.Path(exists=True, file_okay=False),
    help="Directory of generated documents (the --output of 'generate').",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(dir_okay=False),
    help="Output file for the SDK module (e.g., sdk.py).",
)
@click.option(
    "--client-name",
    "-n",
    default="Sdk",
    show_default=True,
    help="Name of the generated root class.",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with a custom sdk.py.j2 template.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def sdk(documents_dir, output, client_name, template_dir, verbose):
    """Generate the SDK wrapper module from generated documents.

    Examples:

        gql-opgen sdk --input ./documents --output ./sdk.py

        gql-opgen sdk -i ./documents -o ./client/sdk.py --client-name Codex
    """
    configure_logging(verbose)
    output_path = Path(output).resolve()

    generator = SdkGenerator(documents_dir, client_name=client_name, template_dir=template_dir)
    try:
        if verbose:
            for op_type, ops in generator.collect_operations().items():
                click.echo(f"  {op_type}: {len(ops)}")

        click.echo(f"Writing to {output_path}...")
        generator.write(str(output_path))
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Done! Output: {output_path}")


if __name__ == "__main__":
    main()
