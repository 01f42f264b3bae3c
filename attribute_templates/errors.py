"""Errors raised while configuring attribute templates.

Resolution itself never raises on absent input; these cover misuse of the
registration API. Exceptions raised inside an installed resolver are not
wrapped and reach the caller unchanged.
"""


class TemplateError(Exception):
    """Base class for template configuration errors."""


class IncompleteDispatchError(TemplateError):
    """A closed set of type tags is not fully covered by a dispatch table."""

    def __init__(self, missing: list[str]):
        self.missing = sorted(missing)
        super().__init__(f"No renderer registered for type tag(s): {', '.join(self.missing)}")


class ResolverNotExtensibleError(TemplateError):
    """The installed resolver is a plain function, not a dispatch table."""
