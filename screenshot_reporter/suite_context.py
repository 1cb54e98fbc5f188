"""Stack of currently open suite names."""

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(kw_only=True)
class SuiteContext:
    """Tracks nested suites to build hierarchical spec descriptions."""

    _names: list[str] = field(default_factory=list)

    def push(self, name: str) -> None:
        self._names.append(name)

    def pop(self) -> str:
        """Close the innermost suite and return its name.

        Raises:
            IndexError: If no suite is open

        """
        if not self._names:
            raise IndexError("No open suite to close")
        return self._names.pop()

    @property
    def depth(self) -> int:
        return len(self._names)

    def descriptions(self, spec_description: str) -> Sequence[str]:
        """Return suite names from outermost to innermost, then the spec."""
        return (*self._names, spec_description)
