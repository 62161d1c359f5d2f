from path_shortcut.app.protocols import PathGenerator, PathValidator


class CheckedGenerator(PathGenerator):
    """Wrap a generator with a feasibility check (e.g. collisions); rejected candidates fail."""

    def __init__(self, inner: PathGenerator, validator: PathValidator):
        self.inner, self.validator = inner, validator

    def generate_path(self, a, b):
        cand = self.inner.generate_path(a, b)
        if cand is None or not self.validator(cand.path):
            return None
        return cand
