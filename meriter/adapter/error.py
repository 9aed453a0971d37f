"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class EventDeliveryError(AdapterError):
    """Event sink rejected or could not receive an event."""

    pass
