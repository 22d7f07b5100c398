"""Operation document emitter.

Walks every field of the Query, Mutation and Subscription root types and
writes one operation document per field:

    <output_dir>/queries/token.graphql
    <output_dir>/mutations/createWebhooks.graphql
    <output_dir>/subscriptions/onTokenEventsCreated.graphql

Fields are processed one at a time in schema declaration order. Any error
aborts the run; documents written before it are left in place.
"""

import logging
import os
from dataclasses import dataclass, field

from .document_builder import DocumentBuilder
from .errors import FileWriteError
from .hooks import HookRunner
from .ir import ROOT_OPERATION_TYPES, RootOperation, TypeCatalog
from .selection import resolve_selection
from .type_chain import render_args, render_type_signature
from .variables import parse_variables

logger = logging.getLogger(__name__)

# operation type -> subdirectory of the output directory
OUTPUT_DIRECTORIES = {
    "query": "queries",
    "mutation": "mutations",
    "subscription": "subscriptions",
}

DOCUMENT_EXTENSION = ".graphql"


@dataclass
class EmitResult:
    """Paths of the documents written by one run, grouped by operation type."""
    files: dict[str, list[str]] = field(
        default_factory=lambda: {op_type: [] for op_type in ROOT_OPERATION_TYPES}
    )

    def add_file(self, operation_type: str, path: str) -> None:
        self.files[operation_type].append(path)

    @property
    def total(self) -> int:
        return sum(len(paths) for paths in self.files.values())


class OperationEmitter:
    """Builds and writes one operation document per root field."""

    def __init__(
        self,
        catalog: TypeCatalog,
        output_dir: str,
        hooks: HookRunner | None = None,
        document_builder: DocumentBuilder | None = None,
    ):
        """Initialize the emitter.

        Args:
            catalog: The fetched type catalog
            output_dir: Directory the documents are written under
            hooks: Optional pre/post generation hooks
            document_builder: Assembles document text; defaults to DocumentBuilder()
        """
        self.catalog = catalog
        self.output_dir = output_dir
        self.hooks = hooks or HookRunner()
        self.document_builder = document_builder or DocumentBuilder()

    def build_document(self, operation: RootOperation) -> str:
        """Resolve variables and selection for one root field and print it."""
        root_field = operation.field
        logger.debug(
            "Resolving %s %s%s: %s",
            operation.operation_type,
            root_field.name,
            render_args(root_field.args),
            render_type_signature(root_field.type),
        )

        variables = parse_variables(root_field.args)
        fields = [f for f in resolve_selection(root_field.type, self.catalog) if f]

        return self.document_builder.build(
            operation.operation_type, root_field.name, variables, fields
        )

    def emit(self) -> EmitResult:
        """Write every root operation's document and return what was written."""
        result = EmitResult()
        operations = self.hooks.run_pre_hooks(self.catalog.all_operations)

        for operation in operations:
            document = self.build_document(operation)
            filename = f"{operation.field.name}{DOCUMENT_EXTENSION}"
            content = self.hooks.run_post_hooks(filename, document)
            relative_path = os.path.join(
                OUTPUT_DIRECTORIES[operation.operation_type], filename
            )
            logger.info("Writing file: %s", relative_path)
            result.add_file(operation.operation_type, self._write_file(relative_path, content))

        return result

    def _write_file(self, relative_path: str, content: str) -> str:
        """Write a document below the output directory and return its full path."""
        full_path = os.path.join(self.output_dir, relative_path)
        if not content.endswith("\n"):
            content += "\n"
        try:
            os.makedirs(os.path.dirname(full_path), exist_ok=True)
            with open(full_path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise FileWriteError(full_path, e) from e
        return full_path
