"""ErrorBag: field path -> ordered list of messages."""

ERROR_KEY = "_error"


class ErrorBag(dict[str, list[str]]):
    """Multi-valued mapping of field paths to failure messages.

    An empty bag means the record is valid. Keys accumulate: adding to or
    merging into an existing path appends, it never replaces.
    """

    def add(self, path: str, message: str) -> None:
        """Append a message under path."""
        self.setdefault(path, []).append(message)

    def merge(self, other: "ErrorBag") -> "ErrorBag":
        """Append every message of other into this bag and return self."""
        for path, messages in other.items():
            self.setdefault(path, []).extend(messages)
        return self

    def first(self, path: str) -> str | None:
        """First message recorded for path, if any."""
        messages = self.get(path)
        return messages[0] if messages else None

    def to_dict(self) -> dict[str, list[str]]:
        """Convert to a plain dictionary for JSON output."""
        return {path: list(messages) for path, messages in self.items()}
