from abc import ABC, abstractmethod
from typing import Sequence, Union

from filelist.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry exclusion rules.

    The tree walker asks its exclusion rules about every directory entry before deciding
    whether to recurse into it or emit it. A positive answer prunes the entry, and for a
    directory its whole subtree. Implementations receive the entry's path relative to the
    walk root, using forward slashes, with a trailing slash for directories (e.g.
    ``"src/node_modules/"`` or ``"src/app.ts"``). Each implementation decides which part
    of that path it looks at.

    File loading and individual rule addition are optional capabilities that depend on
    the rule type.

    Example:
        >>> from filelist.exclusion_rules.name_rules import NamePatternExclusionRules
        >>> rules = NamePatternExclusionRules(["node_modules"])
        >>> rules.exclude("web/node_modules/")
        True
        >>> rules.exclude("web/src/")
        False
        >>> rules.load_rules("rules.txt")
        Traceback (most recent call last):
        ...
        NotImplementedError: NamePatternExclusionRules doesn't support loading rules from files.
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if an entry should be pruned.

        Args:
            path (str): The entry's path relative to the walk root, with forward slashes
                and a trailing slash when the entry is a directory.

        Returns:
            bool: True if the entry should be excluded, False if it should be kept.
        """
        pass

    def has_rules(self) -> bool:
        """
        Report whether this object can exclude anything at all.

        The walker skips rule evaluation entirely when this returns False.
        """
        return True

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        Rule types that don't support file operations use this default, which raises.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
