"""Constants for pysyllaba."""

# Language codes accepted by the G2P stage, mapped to kokorog2p codes.
# The symbol tables only cover English transcriptions.
SUPPORTED_LANGUAGES = {
    "en": "en-us",
    "en-us": "en-us",
    "a": "en-us",
    "en-gb": "en-gb",
    "b": "en-gb",
}
