# metrics_tracker.py

import json
import logging
import os
from collections import defaultdict

logger = logging.getLogger(__name__)


class Metrics:
    """Running sums/counts per key (e.g. prefix_time), optionally persisted as JSON."""

    def __init__(self, path=None):
        self.path = path
        self.m = defaultdict(float)
        self.n = defaultdict(int)
        self._load()

    def _load(self):
        if self.path and os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    d = json.load(f)
                for k, v in d.items():
                    self.m[k] = v["sum"]
                    self.n[k] = v["count"]
            except (OSError, ValueError, KeyError, TypeError) as e:
                logger.warning("Ignoring unreadable metrics file %s: %s", self.path, e)

    def save(self):
        if not self.path:
            return
        d = {k: {"sum": self.m[k], "count": self.n[k]} for k in self.m}
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(d, f, indent=2)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1

    def avg(self, key):
        if self.n[key] == 0: return 0.0
        return self.m[key] / self.n[key]

    def summary(self):
        return {k: (self.n[k], self.avg(k)) for k in sorted(self.m)}
