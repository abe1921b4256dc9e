"""Generation hooks for customizing code generation.

Provides protocols for pre- and post-generation hooks that can modify
the parsed document before generation or transform the generated code
after.

Example usage:
    from gql_dartgen.core.hooks import HookRunner, AddHeaderHook, FilterTypesHook

    runner = HookRunner()
    runner.add_pre_hook(FilterTypesHook(exclude_prefix="_"))
    runner.add_post_hook(AddHeaderHook("// GENERATED CODE - DO NOT MODIFY BY HAND"))
"""

from typing import Protocol, runtime_checkable

from graphql import DocumentNode

from .config import GeneratorConfig


@runtime_checkable
class PreGenerateHook(Protocol):
    """Protocol for pre-generation hooks.

    Pre-generation hooks receive the parsed document before discovery
    and return the document to generate from. Hooks should build a new
    document rather than modify the one they are given.
    """

    def pre_generate(self, document: DocumentNode) -> DocumentNode:
        """Called before code generation.

        Args:
            document: The parsed schema document

        Returns:
            The document to use for generation
        """
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks.

    Post-generation hooks receive the generated code and can transform
    it before it's written to disk.
    """

    def post_generate(self, filename: str, content: str) -> str:
        """Called after code generation.

        Args:
            filename: The name of the generated file (e.g., "output.dart")
            content: The generated code content

        Returns:
            The (possibly transformed) code to write
        """
        ...


class AddHeaderHook:
    """Built-in hook to add a header to generated files.

    Example:
        hook = AddHeaderHook("// GENERATED CODE - DO NOT MODIFY BY HAND")
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, _filename: str, content: str) -> str:
        """Add a header to the beginning of the file."""
        if not self.header.endswith("\n"):
            header = self.header + "\n\n"
        else:
            header = self.header + "\n"
        return header + content


class FilterTypesHook:
    """Built-in hook to drop named definitions by prefix/suffix.

    Definitions without a name (schema definitions) are always kept.

    Example:
        # Remove all types starting with underscore
        hook = FilterTypesHook(exclude_prefix="_")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix

    def _should_include(self, name: str) -> bool:
        """Check if a definition should be included."""
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.exclude_suffix and name.endswith(self.exclude_suffix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        if self.include_suffix and not name.endswith(self.include_suffix):
            return False
        return True

    def pre_generate(self, document: DocumentNode) -> DocumentNode:
        """Return a new document holding only the included definitions."""
        definitions = [
            definition
            for definition in document.definitions
            if getattr(definition, "name", None) is None
            or self._should_include(definition.name.value)
        ]
        return DocumentNode(definitions=tuple(definitions), loc=document.loc)


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "HookRunner":
        """Build the built-in hooks requested by a configuration."""
        runner = cls()
        if config.exclude_prefix:
            runner.add_pre_hook(FilterTypesHook(exclude_prefix=config.exclude_prefix))
        if config.file_header:
            runner.add_post_hook(AddHeaderHook(config.file_header))
        return runner

    def add_pre_hook(self, hook: PreGenerateHook):
        """Add a pre-generation hook."""
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        """Add a post-generation hook."""
        self.post_hooks.append(hook)

    def run_pre_hooks(self, document: DocumentNode) -> DocumentNode:
        """Run all pre-generation hooks in order."""
        for hook in self.pre_hooks:
            document = hook.pre_generate(document)
        return document

    def run_post_hooks(self, filename: str, content: str) -> str:
        """Run all post-generation hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
