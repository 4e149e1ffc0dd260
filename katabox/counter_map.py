"""A counter of short string tags that keeps insertion order."""

_TAG_LENGTH = 29


class TagCounter:
    """Counts occurrences of tags; tags are cut to their first 29 characters."""

    def __init__(self):
        self._counts = {}

    def add(self, tag):
        """Count one more occurrence of ``tag``."""
        key = tag[:_TAG_LENGTH]
        self._counts[key] = self._counts.get(key, 0) + 1

    def count(self, tag):
        """How often ``tag`` was added; 0 for an empty or unknown tag."""
        if not tag:
            return 0
        return self._counts.get(tag[:_TAG_LENGTH], 0)

    def items(self):
        """``(tag, count)`` pairs in the order the tags were first added."""
        return list(self._counts.items())

    def __len__(self):
        return len(self._counts)

    def __str__(self):
        return "\n".join(f"{{{tag}, {n}}}" for tag, n in self._counts.items())