"""Resource filters of the form ``job=id1:id2``."""

from typing import Dict, Iterable, List, Set

from rundeck_importer.core.exceptions import ConfigurationException
from rundeck_importer.models.resources import CanonicalResource, ResourceKind


class ResourceFilter:
    """Keep only listed remote ids for the filtered kinds."""
    
    def __init__(self, rules: Dict[str, Set[str]]):
        self.rules = rules
    
    @classmethod
    def parse(cls, expressions: Iterable[str]) -> "ResourceFilter":
        rules: Dict[str, Set[str]] = {}
        for expression in expressions:
            kind, sep, ids = expression.partition("=")
            kind = kind.strip()
            if not sep or not ids:
                raise ConfigurationException(f"Invalid filter '{expression}', expected kind=id1:id2")
            try:
                kind = ResourceKind(kind).value
            except ValueError:
                raise ConfigurationException(f"Invalid filter kind '{kind}'") from None
            rules.setdefault(kind, set()).update(i for i in ids.split(":") if i)
        return cls(rules)
    
    def apply(self, resources: Iterable[CanonicalResource]) -> List[CanonicalResource]:
        return [
            resource for resource in resources
            if resource.kind not in self.rules or resource.remote_id in self.rules[resource.kind]
        ]
