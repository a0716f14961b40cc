"""Selector scopes and the scope registry."""

from monoselect.scopes.base import BaseScope, SelectorContext
from monoselect.scopes.name_scope import NameScope
from monoselect.scopes.git_scope import ChangeDetector, GitChangeDetector, GitChangedScope
from monoselect.scopes.tag_scope import TagScope, VersionPolicyScope
from monoselect.scopes.json_file_scope import JsonFileScope
from monoselect.scopes.registry import ScopeRegistry, create_default_registry

__all__ = [
    "BaseScope",
    "SelectorContext",
    "NameScope",
    "ChangeDetector",
    "GitChangeDetector",
    "GitChangedScope",
    "TagScope",
    "VersionPolicyScope",
    "JsonFileScope",
    "ScopeRegistry",
    "create_default_registry",
]
