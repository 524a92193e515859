"""Rule registry: stores and orders placement rules."""

from __future__ import annotations

from placement.models.context import PlacementContext
from placement.rules.base import PlacementRule


class PlacementRuleRegistry:
    """
    Central registry for all placement rules.

    Rules are registered at startup. During validation, the registry
    returns the applicable rules sorted by priority with dependencies
    resolved.
    """

    def __init__(self) -> None:
        self._rules: dict[str, PlacementRule] = {}

    def register(self, rule: PlacementRule) -> None:
        """Register a placement rule."""
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        """Remove a rule from the registry."""
        self._rules.pop(rule_id, None)

    def list_rules(self) -> list[PlacementRule]:
        """Return all registered rules."""
        return list(self._rules.values())

    def describe(self) -> list[dict[str, str | int]]:
        """
        Registered rules in the order they run when all of them apply.

        The first entry is the rejection a caller sees when a candidate
        breaks several rules at once.
        """
        ordered = self._resolve_order(sorted(self._rules.values(), key=lambda r: r.priority))
        return [
            {"id": r.get_id(), "name": r.get_name(), "priority": r.priority}
            for r in ordered
        ]

    def get_applicable_rules(self, context: PlacementContext) -> list[PlacementRule]:
        """
        Return rules that apply to the given context, sorted by priority.

        Respects ValidationConfig.enabled_rules and disabled_rules.
        """
        config = context.config
        candidates = list(self._rules.values())

        if config.enabled_rules:
            candidates = [r for r in candidates if r.get_id() in config.enabled_rules]

        if config.disabled_rules:
            candidates = [r for r in candidates if r.get_id() not in config.disabled_rules]

        applicable = [r for r in candidates if r.applies(context)]

        applicable.sort(key=lambda r: r.priority)
        return self._resolve_order(applicable)

    def _resolve_order(self, rules: list[PlacementRule]) -> list[PlacementRule]:
        """Topological sort respecting dependencies."""
        rule_map = {r.get_id(): r for r in rules}
        visited: set[str] = set()
        ordered: list[PlacementRule] = []

        def visit(rule_id: str) -> None:
            if rule_id in visited:
                return
            visited.add(rule_id)
            rule = rule_map.get(rule_id)
            if rule is None:
                return
            for dep_id in rule.dependencies:
                visit(dep_id)
            ordered.append(rule)

        for r in rules:
            visit(r.get_id())

        return ordered


def create_default_registry() -> PlacementRuleRegistry:
    """Create a registry with the standard opening placement rules."""
    from placement.rules.opening.overlap import OpeningOverlapRule
    from placement.rules.opening.bounds import WallBoundsRule

    registry = PlacementRuleRegistry()
    registry.register(OpeningOverlapRule())
    registry.register(WallBoundsRule())
    return registry
