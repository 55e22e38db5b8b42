import random


class ScriptedRandom(random.Random):
    """random.Random whose randrange replays a fixed script, then never spawns.

    Every randrange call's arguments are kept in `calls`.
    """

    def __init__(self, values=()):
        super().__init__(0)
        self.values = list(values)
        self.calls = []

    def randrange(self, *args, **kwargs):
        self.calls.append(args)
        if self.values:
            return self.values.pop(0)
        return 0
