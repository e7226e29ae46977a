"""Exclusion rules matching entry names against case-insensitive patterns."""

from typing import List, Sequence

from filelist.patterns import build_exclude_predicate

from .base_rules import BaseExclusionRules


class NamePatternExclusionRules(BaseExclusionRules):
    """Exclusion rules that look only at the final component of an entry's path.

    Patterns are regular expression fragments; they are joined into one case-insensitive
    alternation which is searched for anywhere in the entry name. Because only the name is
    examined, excluding ``node_modules`` prunes every directory of that name at any depth,
    and a file named ``node_modules.txt`` as well.

    Attributes:
        patterns (List[str]): The patterns in the order they were added.

    Example:
        >>> rules = NamePatternExclusionRules([".git", "node_modules"])
        >>> rules.exclude(".git/")
        True
        >>> rules.exclude("pkg/NODE_MODULES/")
        True
        >>> rules.exclude("pkg/index.ts")
        False
        >>> rules.add_rule("dist")
        >>> rules.exclude("pkg/dist/")
        True
    """

    def __init__(self, patterns: Sequence[str] = ()):
        """Compile the given patterns.

        Raises:
            PatternCompilationError: If the patterns cannot be compiled.
        """
        self.patterns: List[str] = list(patterns)
        self._matches = build_exclude_predicate(self.patterns)

    def exclude(self, path: str) -> bool:
        name = path.rstrip("/").rsplit("/", 1)[-1]
        return self._matches(name)

    def has_rules(self) -> bool:
        return bool(self.patterns)

    def add_rule(self, rule: str) -> None:
        """Add one pattern and recompile the alternation.

        Raises:
            PatternCompilationError: If the combined patterns cannot be compiled. The rule
                is not added in that case.
        """
        patterns = self.patterns + [rule]
        self._matches = build_exclude_predicate(patterns)
        self.patterns = patterns
