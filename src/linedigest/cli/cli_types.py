# topmark:header:start
#
#   project      : LineDigest
#   file         : cli_types.py
#   file_relpath : src/linedigest/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click parameter types shared by the LineDigest commands."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

import click

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

E = TypeVar("E", bound=Enum)


class OutputFormat(str, Enum):
    """Output format of informational subcommands."""

    TEXT = "text"
    JSON = "json"


class EnumChoiceParam(click.ParamType, Generic[E]):
    """Convert an option value to a member of a string-valued Enum.

    Member values match case-insensitively. When the Enum defines a
    ``parse(name)`` classmethod it gets a second chance at the value, which is how
    aliases such as ``SHA-256`` reach `DigestAlgorithm.SHA256`.

    Args:
        enum_cls (type[E]): The Enum whose members are accepted.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name: str = enum_cls.__name__.lower()
        self.choices: list[str] = [str(member.value) for member in enum_cls]

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E:
        """Return the member named by ``value`` or fail with `click.BadParameter`."""
        if isinstance(value, self.enum_cls):
            return value

        text: str = str(value)
        for member in self.enum_cls:
            if str(member.value).lower() == text.lower():
                return member

        parse: Callable[[str], E] | None = getattr(self.enum_cls, "parse", None)
        if parse is not None:
            try:
                return parse(text)
            except ValueError:
                pass

        self.fail(f"'{text}' is not one of: {', '.join(self.choices)}.", param, ctx)

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete member values (bash: ``_LINEDIGEST_COMPLETE=bash_source linedigest``)."""
        from click.shell_completion import CompletionItem

        return [
            CompletionItem(choice)
            for choice in self.choices
            if choice.startswith(incomplete.lower())
        ]

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Render the choices in help output, like `click.Choice`."""
        return "[" + "|".join(self.choices) + "]"

    def __repr__(self) -> str:
        return f"EnumChoiceParam({self.enum_cls.__name__})"
