import asyncio

from prompt_toolkit import PromptSession

from slashkit.completer import GhostTextAutoSuggest, SlashCompleter
from slashkit.completion import ProviderContext
from slashkit.grammar import DEFAULT_REGISTRY
from slashkit.utils import setup_logging
from slashkit.validators import SlashCommandValidator

setup_logging(log_filename=None)

context = ProviderContext.from_registry(
    DEFAULT_REGISTRY,
    models=["claude-sonnet-4", "claude-haiku-4", "gpt-4o"],
    themes=["nord", "dracula", "solarized"],
    environments=["dev", "staging", "prod"],
)

session = PromptSession(
    message="> ",
    completer=SlashCompleter(context),
    auto_suggest=GhostTextAutoSuggest(context),
    validator=SlashCommandValidator(),
    validate_while_typing=False,
)


async def main() -> None:
    while True:
        try:
            line = await session.prompt_async()
        except (EOFError, KeyboardInterrupt):
            break
        print(f"submitted: {line}")


if __name__ == "__main__":
    asyncio.run(main())
