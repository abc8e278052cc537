from __future__ import annotations

NO_VERSION_REASON = "no version for ESP MAC"


class UpdateRejected(Exception):
    """Terminal failure for a single update request.

    ``log_message`` goes to the request log; the device only ever sees
    ``status_code``.
    """

    status_code = 500
    reason = NO_VERSION_REASON

    def __init__(self, log_message: str):
        super().__init__(log_message)
        self.log_message = log_message


class ClientRejected(UpdateRejected):
    status_code = 403
    reason = "Forbidden"


class MalformedVersion(UpdateRejected):
    pass


class CatalogMiss(UpdateRejected):
    pass


class BinaryMissing(UpdateRejected):
    pass


class CatalogUnavailable(RuntimeError):
    pass
