"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    A path is excluded if ANY of the constituent rules excludes it. This lets name
    patterns and ignore files prune the same walk.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from filelist.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> from filelist.exclusion_rules.name_rules import NamePatternExclusionRules
        >>> ignore = GitIgnoreExclusionRules()
        >>> ignore.add_rule("*.tmp")
        >>> composite = CompositeExclusionRules([NamePatternExclusionRules([".git"]), ignore])
        >>> composite.exclude(".git/"), composite.exclude("a/b.tmp"), composite.exclude("a/b.ts")
        (True, True, False)
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        return any(rule.exclude(path) for rule in self.rules)

    def has_rules(self) -> bool:
        """True if ANY of the constituent rules has rules configured."""
        return any(rule.has_rules() for rule in self.rules)
