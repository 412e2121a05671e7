"""Provider resolution from model identifiers.

A ``ProviderResolver`` holds an ordered list of prefix rules and maps a model
string to the provider that serves it. The first rule whose prefix matches
wins; a model no rule claims resolves to the ``"unknown"`` sentinel. Resolution
is pure and never raises; rejecting ``"unknown"`` is the configuration gate's
job.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import ANTHROPIC, GOOGLE, OPENAI, UNKNOWN_PROVIDER


@dataclass(frozen=True)
class PrefixRule:
    """Map models whose identifier starts with ``prefix`` to ``provider``."""

    prefix: str
    provider: str

    def matches(self, model: str) -> bool:
        return model.startswith(self.prefix)


DEFAULT_RULES: Tuple[PrefixRule, ...] = (
    PrefixRule("gpt", OPENAI),
    PrefixRule("claude", ANTHROPIC),
    PrefixRule("gemini", GOOGLE),
)


@dataclass(frozen=True)
class ProviderResolver:
    """Ordered, immutable set of prefix rules.

    Extending the resolver never reorders existing rules: ``with_rule`` returns
    a new resolver with the rule appended, so earlier rules keep precedence.
    """

    rules: Tuple[PrefixRule, ...] = DEFAULT_RULES

    def with_rule(self, prefix: str, provider: str) -> "ProviderResolver":
        return ProviderResolver(self.rules + (PrefixRule(prefix, provider),))

    def resolve(self, model: Optional[str]) -> str:
        """Return the provider id for ``model`` (``"unknown"`` when unmatched)."""
        if not model:
            return UNKNOWN_PROVIDER
        for rule in self.rules:
            if rule.matches(model):
                return rule.provider
        return UNKNOWN_PROVIDER


_DEFAULT_RESOLVER = ProviderResolver()


def resolve_provider(model: Optional[str]) -> str:
    """Resolve ``model`` with the default rule set."""
    return _DEFAULT_RESOLVER.resolve(model)


__all__ = [
    "PrefixRule",
    "DEFAULT_RULES",
    "ProviderResolver",
    "resolve_provider",
]
