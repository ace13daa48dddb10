from pullq import EXHAUSTED


class RecordingSource:
    """
    scripted source that counts pulls. after the script runs out it keeps
    returning EXHAUSTED. deliberately does not subclass Producible.
    """

    def __init__(self, items):
        self._items = list(items)
        self.pulls = 0

    def pull_next(self):
        self.pulls += 1
        if self.pulls > len(self._items):
            return EXHAUSTED
        return self._items[self.pulls - 1]


class CountingForever:
    """0, 1, 2, ... without end"""

    def __init__(self):
        self.pulls = 0

    def pull_next(self):
        value = self.pulls
        self.pulls += 1
        return value
