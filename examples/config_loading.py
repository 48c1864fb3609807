"""config_loading.py"""

from slashkit.completion import (
    CallableProvider,
    ProviderContext,
    ProviderRegistry,
    resolve_completion,
)
from slashkit.config import loader

registry = loader("slashkit.yaml")

providers = ProviderRegistry()
providers.register(CallableProvider("services", lambda _: ["api", "billing", "web"]))

if __name__ == "__main__":
    for text in ("/dep", "/deploy ", "/deploy web --env ", "/dp web --"):
        result = resolve_completion(text, len(text), ProviderContext(), registry, providers)
        labels = [suggestion.label for suggestion in result.suggestions]
        print(f"{text!r:24} {labels} {result.ghost_text or ''}")
