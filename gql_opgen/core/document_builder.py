"""Document builder for GraphQL operations.

Assembles a complete, named operation document from an operation name,
its variable descriptors and its resolved selection tree, using
graphql-core's AST and printer.
"""

from typing import Any

from graphql import (
    ArgumentNode,
    FieldNode,
    NameNode,
    OperationDefinitionNode,
    OperationType,
    SelectionSetNode,
    VariableDefinitionNode,
    VariableNode,
    parse_type,
    print_ast,
)

from .ir import SelectionNode, VariableDescriptor
from .variables import descriptor_type_string

OPERATION_TYPES = {
    "query": OperationType.QUERY,
    "mutation": OperationType.MUTATION,
    "subscription": OperationType.SUBSCRIPTION,
}


def capitalize(name: str) -> str:
    """Upper-case the first character only: ``getNetworks`` -> ``GetNetworks``."""
    return name[:1].upper() + name[1:]


def operation_identifier(field_name: str, operation_type: str) -> str:
    """Operation name for a root field, e.g. ``token`` + query -> ``TokenQuery``."""
    return f"{capitalize(field_name)}{capitalize(operation_type)}"


class DocumentBuilder:
    """Builds GraphQL operation documents."""

    def build(
        self,
        operation_type: str,
        field_name: str,
        variables: dict[str, VariableDescriptor],
        fields: list[SelectionNode],
    ) -> str:
        """Build a GraphQL query/mutation/subscription string.

        Args:
            operation_type: 'query', 'mutation' or 'subscription'
            field_name: The root field the operation selects
            variables: Variable descriptors keyed by argument name
            fields: Selection tree for the root field's return type

        Returns:
            The printed operation document
        """
        if operation_type not in OPERATION_TYPES:
            raise ValueError(f"Unknown operation type: {operation_type}")

        root_field = FieldNode(
            name=NameNode(value=field_name),
            arguments=tuple(self._build_arguments(variables)),
            directives=(),
            selection_set=self._build_selection_set(fields),
        )
        operation = OperationDefinitionNode(
            operation=OPERATION_TYPES[operation_type],
            name=NameNode(value=operation_identifier(field_name, operation_type)),
            variable_definitions=tuple(self._build_variable_definitions(variables)),
            directives=(),
            selection_set=SelectionSetNode(selections=(root_field,)),
        )
        return print_ast(operation)

    @staticmethod
    def _build_variable_definitions(variables: dict[str, VariableDescriptor]):
        """Build the declarations part: ($input: TokenInput!, $limit: Int)"""
        for name, descriptor in variables.items():
            yield VariableDefinitionNode(
                variable=VariableNode(name=NameNode(value=name)),
                type=parse_type(descriptor_type_string(descriptor)),
                default_value=None,
                directives=(),
            )

    @staticmethod
    def _build_arguments(variables: dict[str, VariableDescriptor]):
        """Pass every variable to the root field: (input: $input, limit: $limit)"""
        for name in variables:
            yield ArgumentNode(
                name=NameNode(value=name),
                value=VariableNode(name=NameNode(value=name)),
            )

    def _build_selection_set(self, fields: list[SelectionNode]) -> SelectionSetNode | None:
        selections = []
        for node in fields:
            if isinstance(node, str):
                if node:
                    selections.append(self._field(node))
                continue
            for name, children in node.items():
                # Groups cut off at the depth limit have no children to select
                nested = self._build_selection_set(children)
                if nested is not None:
                    selections.append(self._field(name, nested))
        if not selections:
            return None
        return SelectionSetNode(selections=tuple(selections))

    @staticmethod
    def _field(name: str, selection_set: Any = None) -> FieldNode:
        return FieldNode(
            name=NameNode(value=name),
            arguments=(),
            directives=(),
            selection_set=selection_set,
        )
