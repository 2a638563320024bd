# Term loaders (per-subject JSON sources -> Term entities)

from data.loaders.term_loader import (
    ALL_OR_NOTHING,
    NO_TERMS_MESSAGE,
    PARTIAL,
    load_terms,
    record_to_terms,
)

__all__ = ["ALL_OR_NOTHING", "NO_TERMS_MESSAGE", "PARTIAL", "load_terms", "record_to_terms"]
