"""Document-in, verdict-out entry points.

These are the functions a host process calls: one document in, one
answer out. Malformed input never propagates; it is logged and reported
as a negative verdict.
"""

from mev_detect.detection.sandwich import SandwichDetector
from mev_detect.exceptions import TransactionParseError
from mev_detect.logging import report_parse_failure
from mev_detect.models.alert import SandwichMatch
from mev_detect.serialization import parse_transactions

_default_detector = SandwichDetector()


def explain(document: str | bytes, detector: SandwichDetector | None = None) -> SandwichMatch | None:
    """Parse a transaction document and return the evaluated match.

    Returns None when the document cannot be parsed or no complete
    frontrun/victim/backrun triple exists.
    """
    try:
        transactions = parse_transactions(document)
    except TransactionParseError as e:
        report_parse_failure(e, document)
        return None
    return (detector or _default_detector).analyze(transactions)


def detect(document: str | bytes, detector: SandwichDetector | None = None) -> bool:
    """Return True when the document's cluster is a sandwich attack.

    Parameters
    ----------
    document : str | bytes
        JSON array of transactions, in cluster order.
    detector : SandwichDetector | None
        Detector with custom thresholds; the defaults are used otherwise.

    Returns
    -------
    bool
        The verdict. False for malformed documents.
    """
    match = explain(document, detector)
    return match is not None and match.is_attack
