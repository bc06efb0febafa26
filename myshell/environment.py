import os


class Environment:
    """
    Variable bindings shared by expansion, export and launched children.

    Backed by os.environ unless another mapping is given, so a binding set
    here is inherited by every process started afterwards.
    """

    def __init__(self, variables=None):
        self._vars = os.environ if variables is None else variables

    def get(self, name, default=None):
        return self._vars.get(name, default)

    def set(self, name, value):
        if not name:
            raise ValueError("empty variable name")
        if "\0" in name or "\0" in value:
            raise ValueError(f"embedded null byte in {name!r}")
        self._vars[name] = value

    def snapshot(self):
        """Copy of the bindings, used as a child's environment."""
        return dict(self._vars)
