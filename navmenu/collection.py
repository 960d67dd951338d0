"""Ordered container of menu items."""


class Collection(list):
    """A list of items with a few query helpers."""

    def first(self):
        return self[0] if self else None

    def last(self):
        return self[-1] if self else None

    def filter(self, predicate):
        return Collection(item for item in self if predicate(item))

    def values(self):
        return Collection(self)

    def sort_by(self, key, descending=False):
        """
        Stable sort on ``item.get_attribute(key)``; missing values sort first.

        Values of different types are grouped by type name so mixed keys
        (an explicit integer id next to generated hex ids) never compare
        directly.
        """

        def sort_key(item):
            value = item.get_attribute(key)
            return (value is not None, type(value).__name__, value)

        return Collection(sorted(self, key=sort_key, reverse=descending))

    def __repr__(self):
        return f"Collection({list.__repr__(self)})"
