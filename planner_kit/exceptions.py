class PlannerError(Exception):
    """Base class for planner_kit errors."""


class QRCapacityError(PlannerError):
    """Payload does not fit the requested fixed QR version.

    Retryable: generate again with an auto-sized version.
    """

    def __init__(self, payload: str, version: int):
        super().__init__(f"Payload of {len(payload)} chars does not fit QR version {version}")
        self.payload = payload
        self.version = version
