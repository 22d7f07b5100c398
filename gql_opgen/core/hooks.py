"""Generation hooks for customizing document emission.

Provides protocols for pre- and post-generation hooks that can change which
root operations are emitted, or transform each document before it is
written.

Example usage:
    from gql_opgen.core.hooks import PreGenerateHook, PostGenerateHook

    # Pre-generation hook to skip internal operations
    class SkipInternal(PreGenerateHook):
        def pre_generate(self, operations):
            return [op for op in operations if not op.field.name.startswith("_")]

    # Post-generation hook to add headers
    class AddNotice(PostGenerateHook):
        def post_generate(self, filename, content):
            return "# Generated file, do not edit\\n" + content
"""

from typing import Protocol, runtime_checkable

from .ir import RootOperation


@runtime_checkable
class PreGenerateHook(Protocol):
    """Protocol for pre-generation hooks.

    Pre-generation hooks receive the root operations before any document is
    built and return the operations to emit, in emission order.
    """

    def pre_generate(self, operations: list[RootOperation]) -> list[RootOperation]:
        """Called once before documents are built.

        Args:
            operations: Root operations in schema declaration order

        Returns:
            The (possibly filtered) operations to emit
        """
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks.

    Post-generation hooks receive each document and can transform it before
    it's written to disk.
    """

    def post_generate(self, filename: str, content: str) -> str:
        """Called after building each document.

        Args:
            filename: The name of the document file (e.g., "token.graphql")
            content: The document text

        Returns:
            The (possibly transformed) text to write
        """
        ...


class AddHeaderHook:
    """Built-in hook to add a comment header to generated documents.

    Example:
        hook = AddHeaderHook("Auto-generated - do not edit")
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, _filename: str, content: str) -> str:
        """Add the header, one ``#`` comment per line, before the document."""
        lines = [
            f"# {line}" if line else "#"
            for line in self.header.rstrip("\n").splitlines()
        ]
        return "\n".join(lines) + "\n\n" + content


class FilterFieldsHook:
    """Built-in hook to filter root operations by field name prefix.

    Example:
        # Skip every field starting with an underscore
        hook = FilterFieldsHook(exclude_prefix="_")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        include_prefix: str | None = None,
        operation_types: set[str] | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.include_prefix = include_prefix
        self.operation_types = operation_types

    def _should_include(self, operation: RootOperation) -> bool:
        """Check if an operation should be emitted."""
        name = operation.field.name
        if self.operation_types is not None and operation.operation_type not in self.operation_types:
            return False
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        return True

    def pre_generate(self, operations: list[RootOperation]) -> list[RootOperation]:
        """Filter root operations."""
        return [op for op in operations if self._should_include(op)]


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreGenerateHook):
        """Add a pre-generation hook."""
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        """Add a post-generation hook."""
        self.post_hooks.append(hook)

    def run_pre_hooks(self, operations: list[RootOperation]) -> list[RootOperation]:
        """Run all pre-generation hooks in order."""
        for hook in self.pre_hooks:
            operations = hook.pre_generate(operations)
        return operations

    def run_post_hooks(self, filename: str, content: str) -> str:
        """Run all post-generation hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
