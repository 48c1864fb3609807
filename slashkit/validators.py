# Slashkit Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Input validators for Prompt Toolkit sessions accepting slash commands.

- SlashCommandValidator: rejects malformed slash commands with the parser's
  error message. Input that is not a slash command (plain chat text) passes.
"""
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError, Validator

from slashkit.exceptions import CommandParseError
from slashkit.grammar.registry import CommandRegistry
from slashkit.parser import parse_slash_command


class SlashCommandValidator(Validator):
    """Validator running `parse_slash_command()` on slash-command input."""

    def __init__(self, registry: CommandRegistry | None = None) -> None:
        super().__init__()
        self.registry = registry

    def validate(self, document: Document) -> None:
        text = document.text
        if not text.lstrip().startswith("/"):
            return
        try:
            parse_slash_command(text, self.registry)
        except CommandParseError as error:
            raise ValidationError(
                message=error.message, cursor_position=len(text)
            ) from error
