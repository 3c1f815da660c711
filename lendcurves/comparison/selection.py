"""Market selection coupling for the two-sided comparison view.

The view compares two markets. When one side changes, the other side is
moved to the same token on a counterpart protocol:

- Picking a Marginfi market moves the other side to Kamino, then Drift,
  then Save, then any other protocol offering the same token.
- Picking any other protocol moves the other side to Marginfi's market for
  the token.
- When no counterpart exists the other side is left as is.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from lendcurves.core.models import ProtocolDataRow

Selections = Tuple[str, str]

REFERENCE_PROTOCOL = "marginfi"
FALLBACK_PRIORITY: Tuple[str, ...] = ("kamino", "drift", "save")


@dataclass(frozen=True)
class MarketOption:
    """One selectable (protocol, token) market."""

    key: str
    protocol: str
    token: str
    row: Optional[ProtocolDataRow] = None


def make_key(protocol: str, token: str) -> str:
    return f"{protocol}_{token}"


def build_market_options(rows: Iterable[ProtocolDataRow]) -> List[MarketOption]:
    """Distinct markets in row order; the first row of a duplicate key wins."""
    seen = set()
    options: List[MarketOption] = []
    for row in rows:
        key = make_key(row.protocol, row.token)
        if key in seen:
            continue
        seen.add(key)
        options.append(MarketOption(key=key, protocol=row.protocol, token=row.token, row=row))
    return options


def _find_option(
    options: Sequence[MarketOption],
    token: str,
    protocol: Optional[str] = None,
    exclude_key: Optional[str] = None,
) -> Optional[MarketOption]:
    for option in options:
        if option.token != token or option.key == exclude_key:
            continue
        if protocol is None or option.protocol.lower() == protocol:
            return option
    return None


def compute_coupled_selections(
    options: Sequence[MarketOption],
    current: Selections,
    changed_index: int,
    new_key: str,
) -> Selections:
    """
    Apply a selection change and couple the other side.

    Args:
        options: Available markets
        current: Current (side 0, side 1) keys
        changed_index: Side being changed, 0 or 1
        new_key: Key picked for that side

    Returns:
        The new selection pair. Unknown keys leave the pair unchanged.

    Raises:
        ValueError: changed_index is not 0 or 1
    """
    if changed_index not in (0, 1):
        raise ValueError(f"changed_index must be 0 or 1, got {changed_index!r}")

    picked = next((o for o in options if o.key == new_key), None)
    if picked is None:
        return current[0], current[1]

    other_index = 1 - changed_index
    nxt = [current[0], current[1]]
    nxt[changed_index] = new_key

    token = picked.token
    if picked.protocol.lower() == REFERENCE_PROTOCOL:
        counterpart = None
        for protocol in FALLBACK_PRIORITY:
            counterpart = _find_option(options, token, protocol)
            if counterpart is not None:
                break
        if counterpart is None:
            counterpart = _find_option(options, token, exclude_key=new_key)
    else:
        counterpart = _find_option(options, token, REFERENCE_PROTOCOL)

    if counterpart is not None:
        nxt[other_index] = counterpart.key
    return nxt[0], nxt[1]


def pick_default_first_key(options: Sequence[MarketOption]) -> str:
    """Marginfi market of the alphabetically first token, else the first option."""
    reference = [o for o in options if o.protocol.lower() == REFERENCE_PROTOCOL]
    if reference:
        return min(reference, key=lambda o: o.token.casefold()).key
    return options[0].key if options else ""


def default_selections(options: Sequence[MarketOption]) -> Selections:
    if not options:
        return "", ""
    return compute_coupled_selections(options, ("", ""), 0, pick_default_first_key(options))


def reconcile_selections(options: Sequence[MarketOption], current: Selections) -> Selections:
    """Reset to the defaults when nothing is selected or a selected market disappeared."""
    keys = {o.key for o in options}
    missing = any(key and key not in keys for key in current)
    both_empty = not current[0] and not current[1]
    if both_empty or missing:
        return default_selections(options)
    return current[0], current[1]
