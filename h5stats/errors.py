"""Exception types raised by the report pipeline."""


class H5StatsError(Exception):
    """Base class for all report generation errors."""


class ProviderError(H5StatsError):
    """The tournament API returned no usable data or could not be reached."""

    def __init__(self, query: str, detail: str = ""):
        self.query = query
        message = f"Incorrect data for `{query}` request"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ReferenceLookupError(H5StatsError):
    """A record references a race, hero or user missing from the reference data."""

    def __init__(self, kind: str, ref_id, record_id=None):
        self.kind = kind
        self.ref_id = ref_id
        self.record_id = record_id
        message = f"No {kind} found with id {ref_id}"
        if record_id is not None:
            message = f"{message} (record {record_id})"
        super().__init__(message)


class ReportWriteError(H5StatsError, IOError):
    """Saving the workbook failed; no report file was produced."""


class MalformedDataError(H5StatsError):
    """A raw collection entry (fetched or from a snapshot) cannot be read."""

    def __init__(self, collection: str, detail: str):
        self.collection = collection
        super().__init__(f"Malformed {collection} data: {detail}")
