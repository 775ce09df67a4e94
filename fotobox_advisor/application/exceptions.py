class FlowError(RuntimeError):
    """Raised when the presentation layer drives the flow out of sync with the engine."""
    pass


class InvalidChoice(FlowError):
    """Raised when a value outside the active step's option domain is chosen."""
    pass


class ChoiceRequired(FlowError):
    """Raised when advancing past a required step that has no stored answer."""
    pass


class UnknownStep(FlowError):
    """Raised when a step id does not exist in the catalog."""
    pass


class StepNotReachable(FlowError):
    """Raised when entering a step beyond the furthest step reached so far."""
    pass


class MissingPriceEntry(LookupError):
    """Raised when the price table has no entry for a key (configuration gap)."""

    def __init__(self, key: object, reason: str = "") -> None:
        super().__init__(f"No price entry for {key!r}" + (f": {reason}" if reason else ""))
        self.key = key
        self.reason = reason


class InvalidSelection(ValueError):
    """Raised when a selection value cannot be represented by the catalog at all."""
    pass


class CatalogError(RuntimeError):
    """Raised when the catalog document cannot be read or validated."""
    pass
