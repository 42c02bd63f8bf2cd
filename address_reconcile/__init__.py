from .filters import FilterVerb, filter_addresses, filter_matches, find_duplicates, parse_filter_verb
from .matcher import coincident, match_one, match_partial, partial_coincident
from .models import (
    AddressMatch,
    FieldMismatch,
    MatchOutcome,
    MatchRecord,
    MismatchKind,
    PartialMatchRecord,
    PartialStructuredAddress,
    StructuredAddress,
)
from .parser import AddressParseError, parse_address
from .pipeline import compare_chain, orphan_streets, reconcile, reconcile_partial
from .recognizers import AddressStatus, Directional, PostType, SubaddressType
from .sources import MappingError
