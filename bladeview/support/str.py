"""
String Helper Functions
Laravel-style string matching utilities
"""
from fnmatch import fnmatchcase
from typing import Iterable, Union


class Str:
    """
    String helper class (Laravel-style)

    Provides static methods used by the event dispatcher and the view
    factory to match names against wildcard patterns.
    """

    @staticmethod
    def is_(pattern: Union[str, Iterable[str]], value: str) -> bool:
        """
        Determine if a value matches a pattern

        Exact matches always win; otherwise the pattern is treated as a
        glob ('*', '?', '[seq]') matched against the whole value.

        Args:
            pattern: Pattern or list of patterns
            value: String to test

        Returns:
            True if any pattern matches

        Example:
            Str.is_('admin.*', 'admin.users')  # True
            Str.is_(['mail::*', 'home'], 'home')  # True
        """
        patterns = [pattern] if isinstance(pattern, str) else list(pattern)

        for item in patterns:
            if item == value:
                return True
            if fnmatchcase(value, item):
                return True

        return False

    @staticmethod
    def ends_with(haystack: str, needle: Union[str, list]) -> bool:
        """
        Check if a string ends with a substring

        Example:
            Str.ends_with('home.blade.html', '.blade.html')  # True
        """
        if not haystack:
            return False

        if isinstance(needle, list):
            return any(haystack.endswith(n) for n in needle)

        return haystack.endswith(needle)

    @staticmethod
    def after(subject: str, search: str) -> str:
        """
        Return the remainder of a string after the first occurrence of a value

        Example:
            Str.after('composing: home', ': ')  # 'home'
        """
        if not search or search not in subject:
            return subject

        return subject.split(search, 1)[1]
