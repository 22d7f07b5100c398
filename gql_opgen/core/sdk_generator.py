"""SDK wrapper generator.

Reads a directory of emitted operation documents and renders a Python
module with one bound async method per document:

    sdk = Sdk(transport)
    await sdk.queries.token({"input": {...}})

The directory is the only input: this module does not look at the schema.

Supports custom templates via the template_dir parameter:
    generator = SdkGenerator(documents_dir, template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import ast
import keyword
import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from graphql import GraphQLError, ListTypeNode, NonNullTypeNode, OperationDefinitionNode, parse
from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .document_builder import capitalize
from .emitter import DOCUMENT_EXTENSION, OUTPUT_DIRECTORIES

logger = logging.getLogger(__name__)

SDK_TEMPLATE = "sdk.py.j2"


def snake_case(name: str) -> str:
    """Convert PascalCase or camelCase to snake_case."""
    s1 = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", s1).lower()


def upper_case(name: str) -> str:
    """Convert to UPPER_CASE."""
    return snake_case(name).upper()


def safe_identifier(name: str) -> str:
    """Make a name usable as a Python identifier by suffixing keywords with underscore."""
    if keyword.iskeyword(name):
        return f"{name}_"
    return name


def triple_quoted(text: str) -> str:
    """Render text as a triple-quoted Python string literal."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"""{escaped}"""'


# GraphQL built-in scalar -> Python type hint
SCALAR_TYPE_HINTS = {
    "String": "str",
    "Int": "int",
    "Float": "float",
    "Boolean": "bool",
    "ID": "str",
}


def type_node_hint(node) -> str:
    """Get the Python type hint for a variable's declared GraphQL type."""
    if isinstance(node, NonNullTypeNode):
        return type_node_hint(node.type)
    if isinstance(node, ListTypeNode):
        return f"list[{type_node_hint(node.type)}]"
    return SCALAR_TYPE_HINTS.get(node.name.value, "Any")


def document_variables(document: str, source: str) -> list[tuple[str, str]]:
    """List (name, type hint) for each variable the document declares.

    Raises:
        ValueError: If the document does not parse
    """
    try:
        ast_document = parse(document)
    except GraphQLError as e:
        raise ValueError(f"Invalid GraphQL document in {source}: {e.message}") from e

    variables = []
    for definition in ast_document.definitions:
        if isinstance(definition, OperationDefinitionNode):
            for var in definition.variable_definitions or ():
                variables.append((var.variable.name.value, type_node_hint(var.type)))
    return variables


@dataclass
class SdkOperation:
    """One emitted document, as seen by the wrapper generator."""
    name: str  # file base name, e.g. "getNetworks"
    operation_type: str
    document: str
    variables: list[tuple[str, str]] = field(default_factory=list)
    path: str = ""

    @property
    def identifier(self) -> str:
        return capitalize(self.name)

    @property
    def type_prefix(self) -> str:
        return f"{self.identifier}{capitalize(self.operation_type)}"

    @property
    def variables_type(self) -> str:
        return f"{self.type_prefix}Variables"

    @property
    def result_type(self) -> str:
        return f"{self.type_prefix}Result"

    @property
    def method_name(self) -> str:
        return safe_identifier(snake_case(self.name))

    @property
    def constant_name(self) -> str:
        return upper_case(f"{self.name}_{self.operation_type}_document")


class SdkGenerator:
    """Generates the SDK wrapper module from a documents directory."""

    def __init__(
        self,
        documents_dir: str,
        client_name: str = "Sdk",
        template_dir: Optional[str] = None,
    ):
        """Initialize the generator.

        Args:
            documents_dir: Output directory of the operation emitter
            client_name: Name of the generated root class
            template_dir: Optional directory with a custom sdk.py.j2 template.
                          Templates here override the built-in template.
        """
        self.documents_dir = documents_dir
        self.client_name = client_name

        # Build template loader - custom templates take precedence
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_opgen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["snake_case"] = snake_case
        self.env.filters["upper_case"] = upper_case
        self.env.filters["triple_quoted"] = triple_quoted

    def collect_operations(self) -> dict[str, list[SdkOperation]]:
        """Read every document, grouped by operation type and sorted by name.

        A missing subdirectory means there are no operations of that type.

        Raises:
            ValueError: If a document does not parse, or two documents map
                        to the same generated Python name
        """
        operations: dict[str, list[SdkOperation]] = {}
        generated_names: dict[str, str] = {}
        for op_type, subdir in OUTPUT_DIRECTORIES.items():
            directory = os.path.join(self.documents_dir, subdir)
            operations[op_type] = []
            if not os.path.isdir(directory):
                continue
            for filename in sorted(os.listdir(directory)):
                if not filename.endswith(DOCUMENT_EXTENSION):
                    continue
                path = os.path.join(directory, filename)
                with open(path, encoding="utf-8") as f:
                    document = f.read()
                op = SdkOperation(
                    name=filename[: -len(DOCUMENT_EXTENSION)],
                    operation_type=op_type,
                    document=document,
                    variables=document_variables(document, path),
                    path=path,
                )
                for key in (f"{op_type}.{op.method_name}", op.constant_name, op.variables_type):
                    if key in generated_names:
                        raise ValueError(
                            f"{generated_names[key]} and {path} both generate {key!r}"
                        )
                    generated_names[key] = path
                operations[op_type].append(op)
            logger.debug("Found %d %s documents", len(operations[op_type]), op_type)
        return operations

    def generate_code(self) -> str:
        """Render the SDK module source."""
        operations = self.collect_operations()
        template = self.env.get_template(SDK_TEMPLATE)
        content = template.render(
            client_name=self.client_name,
            queries=operations["query"],
            mutations=operations["mutation"],
            subscriptions=operations["subscription"],
            operations=[op for ops in operations.values() for op in ops],
        )

        # Validate Python syntax
        try:
            ast.parse(content)
        except SyntaxError as e:
            raise ValueError(
                f"Generated invalid Python for {self.client_name}: {e}\n"
                f"Template: {SDK_TEMPLATE}"
            ) from e
        return content

    def write(self, output_path: str) -> str:
        """Render the module and write it to output_path."""
        content = self.generate_code()
        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)
        return output_path
