"""Configuration models and policy file loading."""

from shwrap.configs.enums import NamespaceKind, Shell
from shwrap.configs.loader import ConfigLoader, parse_document
from shwrap.configs.policy import (
    CommandPolicy,
    EffectivePolicy,
    PolicyDocument,
    TemplatePolicy,
)

__all__ = [
    # Enums
    "NamespaceKind",
    "Shell",
    # Policy models
    "CommandPolicy",
    "EffectivePolicy",
    "PolicyDocument",
    "TemplatePolicy",
    # Loading
    "ConfigLoader",
    "parse_document",
]
