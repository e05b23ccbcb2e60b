class UpstreamError(Exception):
    """A third-party API call failed. status_code is None for transport errors."""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code
